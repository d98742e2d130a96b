"""Rule notes for the dice-resolution calculators.

Each Note documents a special rule, ability or house-rule variant that the
combat calculators reference (tooltips next to an option, glossary page,
rules appendix). The catalog is built once at import time and never changes.

Note: this module is intentionally data-only (no Streamlit imports).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Note:
    """One named rule annotation."""

    name: str
    description: Optional[str] = None


def create(name: str, description: Optional[str] = None) -> Note:
    return Note(name, description)


def is_placeholder(note: Note) -> bool:
    """Return True for the empty no-op note."""
    return not note.name and not note.description


# -------------------------------------------------------------
# Kill Team
# -------------------------------------------------------------
Reroll = create(
    "Reroll",
    "Ceaseless rerolls 1s.  Balanced rerolls 1 die.  Relentless rerolls whatever you want."
    "  DoubleBalanced rerolls 2 dice."
    "  BothCeaselessAndBalanced rerolls 1s and then rerolls 1 die that hasn't already been rerolled."
    "  MostCommonFail rerolls most common fail result (ex: reroll 2s).",
)
NoCover = create(
    "NoCover",
    "Defender can not use cover saves. Intercession Squad's Accurate chapter tactic triggers this only if a crit hit is retained.",
)
AutoNorms = create(
    "AutoNorms",
    "How many attack dice can be automatically retained as a normal success. Much like cover saves but for attack dice.",
)
AutoCrits = create(
    "AutoCrits",
    "How many attack dice can be automatically retained as a crit success. Much like cover saves but for attack dice.",
)
FailsToNorms = create(
    "FailsToNorms",
    "How many fails can be modified to normal successes.",
)
NormsToCrits = create(
    "NormsToCrits",
    "How many normal successes can be modified to critical successes.",
)
CloseAssault = create(
    "CloseAssault",
    "If you have two or more sucesses, promote a fail to a normal success.  Imperial Navy Breachers strategic ploy.",
)
Waaagh = create(
    "Waaagh",
    "If you have two or more normal sucesses, promote a norm to a crit.  Kommandos strategic ploy.",
)
EliteModerate = create(
    "EliteModerate",
    "In spending of Kasrkin Elite points, upgrade a fail to a norm or a norm to a crit.",
)
EliteExtreme = create(
    "EliteExtreme",
    "In spending of Kasrkin Elite points, upgrade a fail to a crit.",
)
Rending = create(
    "Rending",
    "If you roll >=1 crit, you can modify a norm to a crit.",
)
FailToNormIfCrit = create(
    "FailToNormIfCrit",
    "Modify a failed hit into a normal hit if you had at least one critical hit; Necron equipment Starfire Core,"
    ' Kommando strategic ploy "Dakka! Dakka! Dakka!", Hive Fleet equipment Toxin Sacs,'
    " Corsair Voidscarred strategic ploy Outcasts.",
)
CoverNormSaves = create(
    "CoverNormSaves",
    "How many saves can be automatically retained as a normal success. High enough APx/Px can limit these auto-saves.",
)
CoverCritSaves = create(
    "CoverCritSaves",
    "How many saves can be automatically retained as a critical success. High enough APx/Px can limit these auto-saves.",
)
JustAScratch = create(
    "JustAScratch",
    "Kommandos Tactical Ploy to ignore damage from a chosen attack die.",
)
InvulnSave = create(
    "InvulnSave",
    "Save value that ignores APx/Px.  If you choose a valid value, InvulnSave will be used even if using Save would be better.",
)
HardyX = create(
    "HardyX",
    "HardyX is like Lethal (changes what values give you a critical success), but for defense."
    " Name comes from Intercession Squad chapter tactic Hardy.",
)
Durable = create(
    "Durable",
    "Durable: in the Resolve Successful Hits step of a combat or shooting attack, one critical hit inflicts"
    " one less damage on this operative (to a minimum of 3).",
)
FeelNoPain = create(
    "FeelNoPain",
    "FNP is the category of abilities where just before damage is actually resolved, you roll a die for each"
    " potential wound, and each rolled success prevents a wound from being lost. Even MWx damage can be"
    " prevented via FNP.",
)
AvgDamageUnbounded = create(
    "AvgDamageUnbounded",
    "The average of damage without regard to defender's wounds.",
)
FireTeamRules = create(
    "FireTeamRules",
    "FireTeamRules refers to whether to use the hit-cancellation rules from Warhammer 40,000 Fire Team"
    " (very similar to Kill Team, but simpler) where any successful save can cancel any successful hit,"
    " but all normal hits must be cancelled before cancelling any critical hit. You can download the rules"
    " and look at p8-9 for how attack actions work, specifically step4 on p9.",
)
Brutal = create(
    "Brutal",
    "Opponent can not do norm parries.",
)
StunMelee = create(
    "Stun",
    "In melee, first crit strike additionally discards 1 norm success of opponent. Second crit strike decrements opponent APL.",
)
NicheAbility = create(
    "NicheAbility",
    "Dueller is Intercession Squad chapter tactic; each crit parry discards additional 1 norm success of opponent."
    "  Hammerhand is Grey Knights psychic power; first strike deals +1 dmg."
    "  Storm Shield is a Custodes ability; each parry discards two successes of opponent instead of 1."
    "  Murderous Entrance is a Void Troupe tactical ploy to strike again after a crit strike.",
)
Duelist = create(
    "Duelist/PreParry",
    "Do one parry before usual dice resolution.",
)
Dummy = create("", "")

# -------------------------------------------------------------
# World of Tanks miniatures
# -------------------------------------------------------------
Deadeye = create(
    "Deadeye",
    "For each crit, attacker draws two crit cards and chooses which one to use.",
)
TargetHullDown = create(
    "TargetHullDown",
    "If target is 'hull down', then attacker discards a normal hit.",
)
HighExplosive = create(
    "HighExplosive",
    "Attacker discards all normal hits before Assessing Damage.",
)


# Declaration order; module globals keep insertion order.
ALL_NOTES: Tuple[Tuple[str, Note], ...] = tuple(
    (identifier, value)
    for identifier, value in globals().items()
    if isinstance(value, Note)
)

NOTES_BY_ID: Mapping[str, Note] = MappingProxyType(dict(ALL_NOTES))

PLACEHOLDER_IDS = frozenset(
    identifier for identifier, note in ALL_NOTES if is_placeholder(note)
)

KILL_TEAM = "Kill Team"
WORLD_OF_TANKS = "World of Tanks"
SECTIONS: Tuple[str, ...] = (KILL_TEAM, WORLD_OF_TANKS)

_WORLD_OF_TANKS_IDS = frozenset({"Deadeye", "TargetHullDown", "HighExplosive"})

NOTE_SECTIONS: Mapping[str, str] = MappingProxyType(
    {
        identifier: WORLD_OF_TANKS if identifier in _WORLD_OF_TANKS_IDS else KILL_TEAM
        for identifier, _ in ALL_NOTES
    }
)


def iter_notes(include_placeholders: bool = True) -> Iterator[Tuple[str, Note]]:
    """Yield (identifier, note) pairs in declaration order."""
    for identifier, note in ALL_NOTES:
        if not include_placeholders and identifier in PLACEHOLDER_IDS:
            continue
        yield identifier, note


def get_note(identifier: str, default: Optional[Note] = None) -> Optional[Note]:
    """Look a note up by its exported identifier (e.g. "StunMelee", not "Stun")."""
    return NOTES_BY_ID.get(identifier, default)


def notes_in_section(section: str) -> Dict[str, Note]:
    return {
        identifier: note
        for identifier, note in ALL_NOTES
        if NOTE_SECTIONS[identifier] == section
    }
