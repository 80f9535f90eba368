"""
One-shot example: send a single question straight to the configured model endpoint.
"""

import asyncio

from handbook_assistant import InferenceError, Message, create_provider, load_config


async def main():
    # Reads handbook_assistant.yaml / .env for the endpoint and key
    config = load_config()
    provider = create_provider(config)

    messages = [
        Message.system("You are a helpful assistant."),
        Message.user("What are 3 things to see in Seattle?"),
    ]

    try:
        response = await provider.complete(
            [m.to_api_format() for m in messages],
            model=config.model,
            temperature=config.temperature,
            top_p=config.top_p,
            max_tokens=config.max_tokens,
        )
    except InferenceError as e:
        print(f"Error during chat completion: {e.message}")
        return

    print(response.content)


if __name__ == "__main__":
    asyncio.run(main())
