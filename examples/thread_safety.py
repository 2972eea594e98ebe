"""Per-context locales with threads and asyncio.

The current locale belongs to the execution context that set it. A shared,
read-only Catalog serves every context at once.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor

from fluent_i18n import Catalog, Translator, get_locale, set_fallback_locale, set_locale


def build_translator() -> Translator:
    catalog = Catalog(fallback="en-US")
    catalog.add_resource("en-US", "greeting = Hello, { $name }!")
    catalog.add_resource("de-DE", "greeting = Hallo, { $name }!")
    catalog.add_resource("ja-JP", "greeting = こんにちは、{ $name }さん！")
    return Translator(catalog)


def example_1_threadpool(t: Translator) -> None:
    """Example 1: Each worker thread renders in its own locale."""
    print("=" * 60)
    print("Example 1: ThreadPoolExecutor")
    print("=" * 60)

    def greet(tag: str) -> str:
        set_locale(tag)
        return f"{tag}: {t('greeting', name='Mina')}"

    with ThreadPoolExecutor(max_workers=3) as executor:
        for line in executor.map(greet, ["en-US", "de-DE", "ja-JP"]):
            print(line)

    print(f"main thread still: {get_locale()}")


def example_2_asyncio(t: Translator) -> None:
    """Example 2: asyncio tasks inherit a copy of the parent locale."""
    print("\n" + "=" * 60)
    print("Example 2: asyncio Tasks")
    print("=" * 60)

    async def handle_request(tag: str) -> str:
        set_locale(tag)
        await asyncio.sleep(0)
        return t("greeting", name="Mina")

    async def main() -> None:
        results = await asyncio.gather(*(handle_request(tag) for tag in ("de-DE", "ja-JP")))
        for result in results:
            print(result)
        print(f"parent task still: {get_locale()}")

    asyncio.run(main())


def example_3_process_fallback(t: Translator) -> None:
    """Example 3: A process fallback applies to contexts that never chose."""
    print("\n" + "=" * 60)
    print("Example 3: Process Fallback")
    print("=" * 60)

    set_fallback_locale("de-DE")
    set_fallback_locale("ja-JP")  # ignored: first caller wins

    with ThreadPoolExecutor(max_workers=1) as executor:
        print(executor.submit(t, "greeting", {"name": "Mina"}).result())


if __name__ == "__main__":
    translator = build_translator()
    example_1_threadpool(translator)
    example_2_asyncio(translator)
    example_3_process_fallback(translator)
