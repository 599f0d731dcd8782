from __future__ import annotations

"""
Scenario tests for every registered pattern demonstration.

Each demonstration must reproduce the reference console transcript of its
pattern exactly.
"""

import pytest

from structural_patterns.core.demos import DEMOS
from structural_patterns.domain.constants import PATTERN_NAMES

EXPECTED = {
    "flyweight": [
        "Creating new Tree object: Oak, Green",
        "Tree [Type: Oak, Color: Green] at position (10, 20)",
        "Creating new Tree object: Pine, Dark Green",
        "Tree [Type: Pine, Color: Dark Green] at position (15, 25)",
        "Reusing existing Tree object: Oak, Green",
        "Tree [Type: Oak, Color: Green] at position (20, 30)",
        "Reusing existing Tree object: Oak, Green",
        "Tree [Type: Oak, Color: Green] at position (25, 35)",
        "Reusing existing Tree object: Pine, Dark Green",
        "Tree [Type: Pine, Color: Dark Green] at position (30, 40)",
        "",
        "Total unique Tree objects created: 2",
    ],
    "proxy": [
        "Images created. No loading yet.",
        "",
        "Loading image: photo1.jpg",
        "Displaying image: photo1.jpg",
        "Displaying image: photo1.jpg",
        "Loading image: photo2.jpg",
        "Displaying image: photo2.jpg",
        "",
        "Total real images loaded: 2",
    ],
    "composite": [
        "=== File System Before Removal ===",
        "+ Folder: Root",
        "  + Folder: Documents",
        "    - File: file1.txt",
        "    - File: file2.txt",
        "    - File: file4.txt",
        "  + Folder: Images",
        "    - File: file3.txt",
        "File System After Removal of file4.txt",
        "+ Folder: Root",
        "  + Folder: Documents",
        "    - File: file1.txt",
        "    - File: file2.txt",
        "  + Folder: Images",
        "    - File: file3.txt",
    ],
    "adapter": [
        "- Online Restaurant Menu -",
        "Pizza - 3500 AMD",
        "Pasta - 3000 AMD",
        "Risotto - 3800 AMD",
        "Sushi - 3840 AMD",
        "Ramen - 2880 AMD",
        "Tempura - 4800 AMD",
        "Khorovats - 4500 AMD",
        "Dolma - 3800 AMD",
        "Lavash - 1000 AMD",
    ],
    "decorator": [
        "Coffee 200 AMD",
        "Coffee + Milk 250 AMD",
        "Coffee + Sugar 230 AMD",
        "Coffee + Milk + Sugar 280 AMD",
    ],
    "facade": [
        "- Creating file via Facade -",
        'Folder "DefaultFolder" created',
        'File "example.txt" created with content: "Hello Facade Pattern!"',
        'Permissions set: "example.txt" is read-write',
        'Backup created for file "example.txt"',
        'File "example.txt" created successfully!',
        "",
        "- Reading file via Facade -",
        'Reading file "example.txt"...',
        'File "example.txt" read successfully!',
        "",
        "- Deleting file via Facade -",
        'File "example.txt" deleted',
        'Backup created for file "example.txt"',
        'File "example.txt" deleted successfully!',
        "",
    ],
    "bridge": [
        "SMS sent: [URGENT] SERVER IS DOWN!",
        "Email sent: [LAZY] meeting at 3pm",
        "Push notification sent: [SIMPLE] Hello, user!",
    ],
}


def test_registry_matches_catalogue():
    assert list(DEMOS) == PATTERN_NAMES


@pytest.mark.parametrize("name", PATTERN_NAMES)
def test_demo_transcript(name, lines):
    DEMOS[name](lines.append)
    assert lines == EXPECTED[name]


def test_proxy_demo_is_repeatable(lines):
    DEMOS["proxy"](lines.append)
    lines.clear()
    DEMOS["proxy"](lines.append)
    assert lines[-1] == "Total real images loaded: 2"
