"""Synthesize a sentence with Arnold on Turbo v2.5 and save it as MP3."""

import asyncio
import os
import time
from pathlib import Path

from dotenv import load_dotenv

from elevenlabs_tts import API_KEY_ENV, ElevenLabsTTSClient
from elevenlabs_tts.core.constants import TURBO_V2_5
from elevenlabs_tts.core.voices import ARNOLD

PROMPT = (
    "Happiness often hides in ordinary moments, waiting for you to pause, "
    "smile, and simply enjoy being present."
)


async def main() -> None:
    load_dotenv()
    api_key = os.getenv(API_KEY_ENV)
    if not api_key:
        raise ValueError(f"API key not found. Please set {API_KEY_ENV} in your environment.")

    print("Creating ElevenLabs client...")
    client = ElevenLabsTTSClient(api_key)

    print(f"Converting text to speech with {ARNOLD.name}...")
    audio = await client.text_to_speech(PROMPT).voice(ARNOLD).model(TURBO_V2_5).execute()
    print(f"Generated {len(audio)} bytes of audio")

    output = Path("outputs") / f"{int(time.time())}.mp3"
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(audio)
    print(f"Audio saved to {output}")


if __name__ == "__main__":
    asyncio.run(main())
