# -*- coding: utf-8 -*-
"""
passforge Wordlist - Bundled passphrase wordlist and wordlist file loading.

The bundled list has 256 words (8 bits per word). For stronger passphrases
load a larger list, e.g. the EFF large wordlist (7776 words, ~12.9 bits/word):

    words = load_wordlist("eff_large_wordlist.txt")
"""

import re
from pathlib import Path
from typing import Tuple, Union

from passforge.core.log import get_logger

logger = get_logger('wordlist')

DEFAULT_WORDLIST: Tuple[str, ...] = (
    "acorn", "adobe", "agent", "alarm", "album", "alien", "alley", "amber",
    "angel", "ankle", "apple", "apron", "arena", "armor", "arrow", "aspen",
    "atlas", "attic", "audio", "award", "bacon", "badge", "bagel", "baker",
    "basin", "beach", "beard", "berry", "bison", "blade", "blank", "blaze",
    "bloom", "board", "bonus", "boost", "booth", "brain", "brick", "bride",
    "brook", "broom", "brush", "cabin", "cable", "camel", "candy", "canoe",
    "cargo", "carol", "cedar", "chain", "chalk", "charm", "chess", "chief",
    "cider", "cigar", "civic", "clamp", "cliff", "clock", "cloud", "clown",
    "coach", "cobra", "comet", "coral", "couch", "crane", "crate", "creek",
    "crisp", "crown", "crumb", "curve", "daisy", "dance", "delta", "depot",
    "diary", "diner", "dingo", "disco", "ditch", "dodge", "donor", "draft",
    "drama", "dream", "drift", "drill", "drum", "eagle", "easel", "elbow",
    "ember", "envoy", "epoch", "equal", "event", "fable", "fairy", "fancy",
    "feast", "fence", "ferry", "fever", "fiber", "field", "flame", "flask",
    "fleet", "flint", "float", "flute", "focus", "forge", "fossil", "frame",
    "frost", "fruit", "fudge", "gable", "gamer", "gauge", "gecko", "ghost",
    "giant", "ginger", "glade", "glass", "globe", "glove", "goose", "grain",
    "grape", "grass", "gravy", "grill", "guard", "guest", "guide", "habit",
    "harbor", "hatch", "haven", "hazel", "heart", "hedge", "heron", "hinge",
    "hobby", "honey", "hotel", "house", "humor", "igloo", "image", "index",
    "inlet", "irony", "ivory", "jelly", "jewel", "joker", "judge", "juice",
    "kayak", "kettle", "knife", "koala", "label", "ladle", "lager", "lemon",
    "lever", "light", "lilac", "linen", "lodge", "lotus", "lunar", "lyric",
    "magic", "mango", "maple", "march", "marsh", "medal", "melon", "metal",
    "meter", "mimic", "mocha", "model", "molar", "money", "moose", "motor",
    "mound", "mouse", "movie", "mural", "music", "nacho", "navel", "nerve",
    "noble", "noise", "north", "novel", "nudge", "nurse", "oasis", "ocean",
    "olive", "omega", "onion", "opera", "orbit", "otter", "oxide", "paddle",
    "panda", "panel", "paper", "parka", "pasta", "patio", "peach", "pearl",
    "pedal", "penny", "piano", "pilot", "pixel", "pizza", "plaza", "plume",
    "polar", "pouch", "prism", "pulse", "quail", "quake", "quart", "quest",
    "quilt", "radar", "radio", "raven", "razor", "relay", "ridge", "river",
)

WORDLIST_SIZE = len(DEFAULT_WORDLIST)

# "11111\tabacus" (EFF dice format) or a bare word
_LINE_RE = re.compile(r'^(?:[1-6]{4,6}\s+)?(\S+)$')


def load_wordlist(path: Union[str, Path]) -> Tuple[str, ...]:
    """
    Load a wordlist file.

    Accepts one word per line or EFF dice lines ("11111<TAB>word"). Blank
    lines and '#' comments are skipped, words are lowercased, duplicates
    are dropped and the file order is kept.

    Args:
        path: Path to a UTF-8 text file

    Returns:
        Tuple of words (may be empty)

    Raises:
        FileNotFoundError: If the file does not exist
        IsADirectoryError: If the path is a directory
        PermissionError: If the file cannot be read
        ValueError: If the file is not valid UTF-8
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Wordlist not found: {path}")
    if path.is_dir():
        raise IsADirectoryError(f"Wordlist is a directory: {path}")

    words = []
    seen = set()
    skipped = 0
    try:
        with open(path, 'r', encoding='utf-8') as f:
            for raw in f:
                line = raw.strip()
                if not line or line.startswith('#'):
                    continue
                match = _LINE_RE.match(line)
                if match is None:
                    skipped += 1
                    continue
                word = match.group(1).lower()
                if word in seen:
                    continue
                seen.add(word)
                words.append(word)
    except UnicodeDecodeError as e:
        raise ValueError(f"Wordlist is not valid UTF-8: {path} ({e.reason})") from None

    if skipped:
        logger.warning("%s: skipped %d malformed lines", path, skipped)
    logger.debug("Loaded %d words from %s", len(words), path)
    return tuple(words)
