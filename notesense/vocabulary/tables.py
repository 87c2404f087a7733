"""Symptom and body alias tables.

Both tables are built once at import and exposed read-only. Keys are
lowercase; lookups lowercase their argument and never stem or fuzz.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from ..schemas import IssueSeverity, MuscleGroup, Vocabulary

_MINOR = IssueSeverity.minor
_MODERATE = IssueSeverity.moderate
_SEVERE = IssueSeverity.severe

SYMPTOM_SEVERITY: Mapping[str, IssueSeverity] = MappingProxyType(
    {
        "tight": _MINOR,
        "stiff": _MINOR,
        "restricted": _MINOR,
        "weak": _MINOR,
        "sore": _MODERATE,
        "ache": _MODERATE,
        "aching": _MODERATE,
        "tender": _MODERATE,
        "fatigued": _MODERATE,
        "cramping": _MODERATE,
        "cramp": _MODERATE,
        "pain": _SEVERE,
        "painful": _SEVERE,
        "sharp": _SEVERE,
        "burning": _SEVERE,
        "tingling": _SEVERE,
        "numb": _SEVERE,
        "numbness": _SEVERE,
        "swollen": _SEVERE,
        "swelling": _SEVERE,
        "clicky": _SEVERE,
        "clicking": _SEVERE,
        "popping": _SEVERE,
    }
)

_DELTS = (MuscleGroup.front_delt, MuscleGroup.side_delt, MuscleGroup.rear_delt)

# The first group of each entry doubles as the token's normalized value.
BODY_ALIASES: Mapping[str, Tuple[MuscleGroup, ...]] = MappingProxyType(
    {
        "chest": (MuscleGroup.chest,),
        "quads": (MuscleGroup.quads,),
        "quad": (MuscleGroup.quads,),
        "hamstrings": (MuscleGroup.hamstrings,),
        "hamstring": (MuscleGroup.hamstrings,),
        "glutes": (MuscleGroup.glutes,),
        "glute": (MuscleGroup.glutes,),
        "lats": (MuscleGroup.lats,),
        "lat": (MuscleGroup.lats,),
        "traps": (MuscleGroup.traps,),
        "trap": (MuscleGroup.traps,),
        "biceps": (MuscleGroup.biceps,),
        "bicep": (MuscleGroup.biceps,),
        "triceps": (MuscleGroup.triceps,),
        "tricep": (MuscleGroup.triceps,),
        "calves": (MuscleGroup.calves,),
        "calf": (MuscleGroup.calves,),
        "core": (MuscleGroup.core,),
        "abs": (MuscleGroup.core,),
        "forearms": (MuscleGroup.forearms,),
        "forearm": (MuscleGroup.forearms,),
        # Indirect aliases
        "knee": (MuscleGroup.quads,),
        "knees": (MuscleGroup.quads,),
        "shoulder": _DELTS,
        "shoulders": _DELTS,
        "back": (MuscleGroup.lats, MuscleGroup.lower_back),
        "lower back": (MuscleGroup.lower_back,),
        "hip": (MuscleGroup.glutes,),
        "hips": (MuscleGroup.glutes,),
        "ankle": (MuscleGroup.calves,),
        "ankles": (MuscleGroup.calves,),
        "wrist": (MuscleGroup.forearms,),
        "wrists": (MuscleGroup.forearms,),
        "elbow": (MuscleGroup.forearms, MuscleGroup.triceps),
        "elbows": (MuscleGroup.forearms, MuscleGroup.triceps),
        "shin": (MuscleGroup.calves,),
        "shins": (MuscleGroup.calves,),
        "groin": (MuscleGroup.glutes, MuscleGroup.quads),
        "neck": (MuscleGroup.traps,),
    }
)


def severity_of(keyword: str) -> IssueSeverity | None:
    """Return the severity for a symptom keyword, or None if unknown."""
    return SYMPTOM_SEVERITY.get(keyword.lower())


def groups_of(alias: str) -> Tuple[MuscleGroup, ...] | None:
    """Return every muscle group a body alias expands to, or None if unknown."""
    return BODY_ALIASES.get(alias.lower())


def vocabulary() -> Vocabulary:
    return Vocabulary(body_parts=list(BODY_ALIASES), symptoms=list(SYMPTOM_SEVERITY))
