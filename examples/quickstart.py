"""Quickstart example for fluent-i18n.

Loads a small catalog from a temporary directory, picks a locale and
renders a few messages, including the fail-soft cases.
"""

import tempfile
from pathlib import Path

from fluent_i18n import LocaleParseError, Translator, load_catalog, set_locale, set_raw_mode

EN = """
greeting = Hello, world!
welcome = Welcome, { $name }!
saved-to = Saved to { $path }
"""

FR = """
greeting = Bonjour, le monde!
welcome = Bienvenue, { $name }!
"""

with tempfile.TemporaryDirectory() as tmpdir:
    root = Path(tmpdir)
    for tag, source in (("en-US", EN), ("fr-FR", FR)):
        (root / tag).mkdir()
        (root / tag / "main.ftl").write_text(source, encoding="utf-8")

    t = Translator(load_catalog(root, fallback="en-US"))

# Example 1: Current locale
print("=" * 50)
print("Example 1: Current Locale")
print("=" * 50)

set_locale("fr-FR")
print(t("greeting"))
# Output: Bonjour, le monde!

print(t("welcome", name="Orhun"))
# Output: Bienvenue, Orhun!

# Example 2: Fallback and missing keys
print("\n" + "=" * 50)
print("Example 2: Fallback and Missing Keys")
print("=" * 50)

print(t("saved-to", path=Path("/tmp/report.pdf")))
# Output: Saved to /tmp/report.pdf (from en-US)

print(t("no-such-key"))
# Output: Unknown localization key: "no-such-key"

# Example 3: Raw mode
print("\n" + "=" * 50)
print("Example 3: Raw Mode")
print("=" * 50)

set_raw_mode(True)
print(t("welcome", name="Orhun"))
# Output: welcome
set_raw_mode(False)

# Example 4: Malformed locale
print("\n" + "=" * 50)
print("Example 4: Malformed Locale")
print("=" * 50)

try:
    set_locale("???")
except LocaleParseError as e:
    print(e)
    # Output (in the current locale, here French):
    # Impossible d’analyser la langue « ??? »
    # error[INVALID_LANGUAGE]: Invalid language subtag '???'
    #   --> subtag 0
    #   = help: Language subtags are 2-3 or 5-8 ASCII letters
