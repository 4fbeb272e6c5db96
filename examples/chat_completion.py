"""
Example: Chat completion and speech

Builds a ChatGPT connector by name, asks one question and writes the answer
as an mp3 into ./out. Set OPENAI_API_KEY (or put it in a .env file) first.
"""

import asyncio
import os
from pathlib import Path

from dotenv import load_dotenv

from ai_connectify import AIConnectify, AIConnectifyError

load_dotenv()


async def example_chat_completion():
    """Ask a question and print the answer."""
    print("=== Chat completion ===\n")

    async with AIConnectify("ChatGPT", os.getenv("OPENAI_API_KEY")) as ai:
        response = await ai.connector.create_chat_completion(
            [{"role": "user", "content": "Write a haiku about Python programming"}],
            "gpt-4o-mini",
            {"temperature": 0.7, "max_tokens": 100},
        )
        answer = response["choices"][0]["message"]["content"]
        print(answer)

        # Speech is written under ./out with a random file name
        Path("out").mkdir(exist_ok=True)
        speech = await ai.connector.create_speech(answer, "out")
        print(f"\nSpeech saved to {speech['audio_path']}")


async def main():
    try:
        await example_chat_completion()
    except AIConnectifyError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    asyncio.run(main())
