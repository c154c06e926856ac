"""Key -> action mapping for the panel browser.

PanelBrowserApp.on_key dispatches through KEYMAP. Keys in PRIORITY_KEYMAP
are turned into priority Textual bindings instead, because the screen would
otherwise consume them for focus movement before on_key sees them.
"""

# [LAW:one-source-of-truth] Key→action mapping.
KEYMAP: dict[str, str] = {
    # Panel navigation
    "n": "next_panel",
    ".": "next_panel",
    "full_stop": "next_panel",
    "right": "next_panel",
    "p": "prev_panel",
    ",": "prev_panel",
    "comma": "prev_panel",
    "left": "prev_panel",

    # Registry edits
    "x": "remove_panel",

    "q": "quit",
}

PRIORITY_KEYMAP: dict[str, str] = {
    "tab": "next_panel",
    "shift+tab": "prev_panel",
}

# Shown in the footer hint, in this order.
KEY_HINTS: list[tuple[str, str]] = [
    ("tab/n", "next"),
    ("shift+tab/p", "prev"),
    ("x", "hide panel"),
    ("q", "quit"),
]
