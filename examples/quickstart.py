"""Quickstart example for botstrings.

This example loads the response files next to this script, generates the
accessor class, and calls it for a few guilds.

Note: The generated source is executed in-process for brevity. In a real
bot, run ``botstrings generate`` as a build step and import the module.
"""

from pathlib import Path
from typing import Any

from botstrings import (
    BotStrings,
    LocalStringsProvider,
    Localization,
    UnknownCultureError,
    generate_source,
    load_directory,
)

RESPONSES = Path(__file__).parent / "responses"

# Example 1: Loading response files
print("=" * 50)
print("Example 1: Loading Response Files")
print("=" * 50)

resources, summary = load_directory(RESPONSES)
print(summary)
# Output: LoadSummary(total=3, ok=3, malformed=0, errors=0)

for locale in sorted(resources):
    print(f"{locale}: {len(resources[locale])} keys")
# Output: de-DE: 3 keys
# Output: en-US: 6 keys
# Output: owo: 1 keys

# Example 2: Generating the accessor class
print("\n" + "=" * 50)
print("Example 2: Generating Accessors")
print("=" * 50)

source = generate_source(resources)
for line in source.splitlines():
    if line.lstrip().startswith("def "):
        print(line.strip())
# Output: def __init__(self, strings: StringLookup, localization: CultureResolver) -> None:
# Output: def _get_culture(self, guild_id: int | None = None) -> str:
# Output: def Eightball(self, guild_id: int | None, param0: object) -> str:
# ...

namespace: dict[str, Any] = {}
exec(compile(source, "generated_bot_strings.py", "exec"), namespace)  # noqa: S102
GeneratedBotStrings = namespace["GeneratedBotStrings"]

# Example 3: Calling accessors per guild
print("\n" + "=" * 50)
print("Example 3: Per-Guild Cultures")
print("=" * 50)

GERMAN_GUILD = 1001
OWO_GUILD = 1002

provider = LocalStringsProvider(directory=RESPONSES)
localization = Localization(known_locales=provider.locales)
localization.set_guild_culture(GERMAN_GUILD, "de_DE")
localization.set_guild_culture(OWO_GUILD, "owo")

strings = GeneratedBotStrings(BotStrings(localization, provider), localization)

print(strings.AfkSet(None, "lunch"))
# Output: AFK message set to: lunch
print(strings.AfkSet(GERMAN_GUILD, "Mittag"))
# Output: AFK-Nachricht gesetzt: Mittag
# Templates for owo are used as written; arguments are not rewritten.
print(strings.AfkSet(OWO_GUILD, "nap"))
# Output: AFK message set to: nap owo

# Example 4: Default-culture fallback
print("\n" + "=" * 50)
print("Example 4: Fallback to the Default Culture")
print("=" * 50)

# Not translated into German: the English response is used.
print(strings.PollCreated(GERMAN_GUILD, "#general", 3))
# Output: Poll created in #general with 3 options.

# Gapped placeholders produce a variadic accessor.
print(strings.TicketClosed(GERMAN_GUILD, None, 42, "Alice"))
# Output: Ticket #42 closed by Alice.

# Example 5: Rejecting unknown cultures
print("\n" + "=" * 50)
print("Example 5: Culture Validation")
print("=" * 50)

try:
    localization.set_guild_culture(GERMAN_GUILD, "xx-NOPE")
except UnknownCultureError as e:
    print(f"Rejected: {e.culture}")
# Output: Rejected: xx-NOPE

print(localization.get_culture(GERMAN_GUILD))
# Output: de-DE
