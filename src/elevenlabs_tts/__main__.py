"""Command-line demo: synthesize one text and save the audio to a file."""

import argparse
import asyncio
import logging
import os
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

from .client import ElevenLabsTTSClient
from .config import ClientConfig
from .core.constants import API_KEY_ENV
from .core.messages.voice_settings import VoiceSettings
from .core.voices import find_voice
from .errors import ElevenLabsError

logger = logging.getLogger("elevenlabs_tts")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="ElevenLabs text-to-speech")
    parser.add_argument("text", type=str, help="Text to synthesize")
    parser.add_argument("--config", type=str, help="Path to config.yaml")
    parser.add_argument("--voice", type=str, help="Premade voice name or voice ID")
    parser.add_argument("--model", type=str, help="Model ID")
    parser.add_argument("--format", type=str, help="Output format, e.g. mp3_44100_128")
    parser.add_argument("--language", type=str, help="ISO 639-1 language code")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--stability", type=float)
    parser.add_argument("--similarity", type=float)
    parser.add_argument("--style", type=float)
    parser.add_argument("--speed", type=float)
    parser.add_argument("--output", type=str, help="Output file (default: outputs/<timestamp>.mp3)")
    return parser.parse_args(argv)


async def synthesize(args: argparse.Namespace, client: ElevenLabsTTSClient) -> bytes:
    builder = client.text_to_speech(args.text)

    if args.voice:
        voice = find_voice(args.voice)
        if voice is not None:
            builder.voice(voice)
        else:
            builder.voice_id(args.voice)
    if args.model:
        builder.model(args.model)
    if args.format:
        builder.output_format(args.format)
    if args.language:
        builder.language_code(args.language)
    if args.seed is not None:
        builder.seed(args.seed)

    tuning = (args.stability, args.similarity, args.style, args.speed)
    if any(value is not None for value in tuning):
        builder.voice_settings(
            VoiceSettings.new(
                stability=args.stability,
                similarity_boost=args.similarity,
                style=args.style,
                speed=args.speed,
            )
        )

    return await builder.execute()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = ClientConfig.from_yaml(args.config)

    load_dotenv()

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    api_key = os.getenv(API_KEY_ENV)
    if not api_key:
        raise ValueError(f"API key not found. Please set {API_KEY_ENV} in your environment.")

    client = ElevenLabsTTSClient.from_config(api_key, config)

    try:
        audio = asyncio.run(synthesize(args, client))
    except ElevenLabsError as e:
        logger.error(f"Text-to-speech failed: {e}")
        return 1

    output = Path(args.output) if args.output else Path("outputs") / f"{int(time.time())}.mp3"
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(audio)
    logger.info(f"Audio saved to {output} ({len(audio)} bytes)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
