"""Icons shown in the taskboard UI."""

ICON_ADD = "+"
ICON_CLOSE = "❌"
ICON_DESCRIPTION = "\U0001f4dd"
