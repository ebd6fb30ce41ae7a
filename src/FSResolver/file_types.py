"""Extension → category lookup, category icons, and entry name filtering."""

from __future__ import annotations

import os

# Category → extensions. Order matters: the first category listing an
# extension wins (".sh" is "code", ".md" is "document").
CATEGORY_EXTENSIONS: dict[str, frozenset[str]] = {
    "image": frozenset({
        ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".svg", ".webp", ".psd",
        ".tiff", ".tif", ".heic", ".raw", ".arw", ".cr2", ".nef", ".orf", ".sr2",
    }),
    "video": frozenset({".mp4", ".avi", ".mkv", ".mov", ".webm"}),
    "audio": frozenset({".mp3", ".wav", ".ogg", ".flac", ".aac", ".m4a"}),
    "document": frozenset({".doc", ".docx", ".txt", ".rtf", ".md"}),
    "pdf": frozenset({".pdf"}),
    "book": frozenset({
        ".epub", ".mobi", ".azw", ".azw3", ".fb2", ".djvu", ".cbz", ".cbr",
    }),
    "code": frozenset({
        ".js", ".ts", ".json", ".html", ".css", ".py", ".java", ".cpp",
        ".c", ".cs", ".sh", ".rb", ".php", ".go", ".rs", ".xml", ".yaml", ".yml",
    }),
    "archive": frozenset({".zip", ".rar", ".7z", ".tar", ".gz", ".bz2", ".xz"}),
    "spreadsheet": frozenset({".xls", ".xlsx", ".ods", ".csv"}),
    "presentation": frozenset({".ppt", ".pptx", ".odp"}),
    "font": frozenset({".ttf", ".otf", ".woff", ".woff2", ".eot"}),
    "android": frozenset({".apk"}),
    "ios": frozenset({".ipa"}),
    "executable": frozenset({".exe", ".bat", ".bin", ".msi", ".app"}),
    "database": frozenset({".sql", ".db", ".sqlite", ".mdb", ".accdb"}),
    "disk": frozenset({".iso", ".img", ".dmg"}),
    "log": frozenset({".log"}),
    "config": frozenset({".ini", ".cfg", ".conf", ".env", ".toml"}),
    "script": frozenset({".sh", ".bat", ".ps1"}),
    "markdown": frozenset({".md", ".markdown"}),
    "makefile": frozenset({".makefile"}),
    "security": frozenset({".key", ".pem", ".cert", ".csr", ".crt"}),
    "backup": frozenset({".bak", ".backup", ".old"}),
    "docker": frozenset({".dockerfile"}),
    "temp": frozenset({".tmp", ".temp", ".swp"}),
    "utility": frozenset({".psm1", ".psd1"}),
}

UNKNOWN_CATEGORY = "unknown"
FOLDER_CLOSED = "dir"
FOLDER_OPEN = "dir_open"

ICONS: dict[str, str] = {
    FOLDER_CLOSED: "📁",
    FOLDER_OPEN: "📂",
    "file": "📄",
    "unknown": "📄",
    "image": "🖼️",
    "video": "🎞️",
    "audio": "🎵",
    "document": "📋",
    "pdf": "📓",
    "book": "📙",
    "code": "📝",
    "archive": "🗃️",
    "spreadsheet": "📊",
    "presentation": "📽️",
    "font": "🔤",
    "executable": "⚙️",
    "android": "🤖",
    "ios": "📱",
    "database": "🗄️",
    "disk": "💿",
    "log": "📜",
    "config": "🛠️",
    "script": "🖥️",
    "markdown": "📑",
    "makefile": "🔧",
    "security": "🔒",
    "backup": "💾",
    "docker": "🐳",
    "temp": "🧹",
    "utility": "🧰",
}


def get_category(name: str) -> str:
    """Return the category of a file name based on its lowercase extension."""
    ext = os.path.splitext(name)[1].lower()
    if not ext:
        return UNKNOWN_CATEGORY
    for category, extensions in CATEGORY_EXTENSIONS.items():
        if ext in extensions:
            return category
    return UNKNOWN_CATEGORY


def get_icon(category: str) -> str:
    """Return the display icon for a file or folder category."""
    return ICONS.get(category, ICONS[UNKNOWN_CATEGORY])


def is_skipped_name(
    name: str,
    ignored_names: tuple[str, ...] | list[str] = (),
    include_dotfiles: bool = False,
) -> bool:
    """Return True if an entry must be left out of the tree because of its name.

    Dotfiles are skipped unless *include_dotfiles* is set. Ignored names
    match the whole name, case-insensitively.
    """
    if not include_dotfiles and name.startswith("."):
        return True
    lowered = name.lower()
    return any(lowered == ignored.lower() for ignored in ignored_names)


def parse_name_input(raw: str) -> list[str]:
    """Split a comma-separated string into individual entry names.

    Whitespace around each name is stripped. Empty segments are ignored.
    """
    if not raw or not raw.strip():
        return []
    return [n.strip() for n in raw.split(",") if n.strip()]
