"""Two continuous generations on eleven_v3 with custom voice settings.

eleven_v3 only accepts discrete stability levels, so the discrete settings
contract is enabled. The second request chains the first via its request id.
"""

import asyncio
import os
import time
from pathlib import Path

from dotenv import load_dotenv

from elevenlabs_tts import API_KEY_ENV, ClientConfig, ElevenLabsTTSClient, VoiceSettings
from elevenlabs_tts.core.constants import ELEVEN_V3, SettingsContract
from elevenlabs_tts.core.voices import CHARLOTTE

FIRST = "Life feels lighter when you slow down and take a deep breath."
SECOND = "Then notice the small details around you."


async def main() -> None:
    load_dotenv()
    api_key = os.getenv(API_KEY_ENV)
    if not api_key:
        raise ValueError(f"API key not found. Please set {API_KEY_ENV} in your environment.")

    config = ClientConfig(settings_contract=SettingsContract.DISCRETE)
    client = ElevenLabsTTSClient.from_config(api_key, config)
    settings = VoiceSettings.new(stability=1.0, similarity_boost=0.9).with_speed(0.9)

    print(f"Converting text to speech with {CHARLOTTE.name}...")
    first = await (
        client.text_to_speech(FIRST)
        .voice(CHARLOTTE)
        .model(ELEVEN_V3)
        .voice_settings(settings)
        .next_text(SECOND)
        .execute_with_metadata()
    )

    builder = (
        client.text_to_speech(SECOND)
        .voice(CHARLOTTE)
        .model(ELEVEN_V3)
        .voice_settings(settings)
    )
    if first.request_id:
        builder.previous_request_ids([first.request_id])
    else:
        builder.previous_text(FIRST)
    second = await builder.execute()

    output_dir = Path("outputs")
    output_dir.mkdir(parents=True, exist_ok=True)
    stamp = int(time.time())
    for index, audio in enumerate((first.audio, second), start=1):
        output = output_dir / f"{stamp}_{index}.mp3"
        output.write_bytes(audio)
        print(f"Audio saved to {output} ({len(audio)} bytes)")


if __name__ == "__main__":
    asyncio.run(main())
