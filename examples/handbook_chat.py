"""
Chat with the employee handbook from the terminal, without the HTTP server.
"""

import asyncio

from handbook_assistant import ChatOrchestrator, load_config


async def main():
    config = load_config()
    orchestrator = ChatOrchestrator.from_config(config)

    for question in ["My name is Alex", "How many vacation days do employees get?", "What is my name?"]:
        result = await orchestrator.respond("terminal", question)
        print(f"You: {question}")
        print(f"AI: {result.reply}")
        for source in result.sources:
            print(f"  [source] {source[:80]}...")
        print()


if __name__ == "__main__":
    asyncio.run(main())
