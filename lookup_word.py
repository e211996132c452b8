"""
LingoSnap: Command-line lookup
------------------------------

Looks up one English word, prints its card to the terminal and optionally
saves it to the collection and/or writes the print document.

    python lookup_word.py apple --save --print
"""

import argparse
import asyncio
import sys

from lingosnap.config import Config
from lingosnap.errors import DuplicateWordError, InputError, PersistenceWriteError, ProviderError
from lingosnap.services import PrintService, SavedCollection, SearchOrchestrator


async def main(args: argparse.Namespace) -> bool:
    """Main entry point."""
    orchestrator = SearchOrchestrator()
    try:
        word = await orchestrator.search(args.word)
    except InputError:
        print("[ERROR] Please enter a word.")
        return False
    except ProviderError as e:
        print(f"[ERROR] {Config.messages()['search_error']} ({e.stage or 'unknown'}: {e})")
        return False
    finally:
        await orchestrator.close()

    print(f"{word.english.capitalize()}  {word.phonetic}")
    print(f"  {word.meaning}")
    print(f"  \"{word.example_sentence}\"")
    print(f"  {word.example_translation}")

    collection = None
    if args.save or args.print:
        collection = SavedCollection()
        collection.load()

    if args.save:
        try:
            collection.add(word)
            print(f"[OK] Saved ({collection.count} word(s) in collection)")
        except DuplicateWordError:
            print(f"[!] {Config.messages()['duplicate_notice']}")
        except PersistenceWriteError as e:
            print(f"[ERROR] {e}")
            return False

    if args.print:
        words = collection.list() if args.save else [word]
        path = await PrintService().export(words)
        print(f"[OK] Print document: {path}")

    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Look up an English word as a LingoSnap card")
    parser.add_argument("word", type=str)
    parser.add_argument("--save", action="store_true", help="Add the word to the saved collection")
    parser.add_argument("--print", action="store_true", help="Write the HTML print document")
    try:
        success = asyncio.run(main(parser.parse_args()))
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        print("\n[!] Aborted by user.")
        sys.exit(1)
