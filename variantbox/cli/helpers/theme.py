"""Theme system for consistent Rich styling across CLI commands."""

from rich.console import Console
from rich.table import Table
from rich.theme import Theme


class Colors:
    """Standardized color palette for CLI output."""

    SUCCESS = "bold green"
    ERROR = "bold red"
    WARNING = "bold yellow"
    INFO = "bold blue"

    PRIMARY = "cyan"
    SECONDARY = "blue"
    ACCENT = "magenta"
    MUTED = "dim"

    HEADER = "bold cyan"
    NORMAL = "white"


class Icons:
    """Standardized icons for different message types."""

    SUCCESS = "✅"
    ERROR = "❌"
    WARNING = "⚠️"
    INFO = "ℹ️"
    VARIANT = "📦"

    # Text fallbacks
    _TEXT = {
        "SUCCESS": "[OK]",
        "ERROR": "[ERROR]",
        "WARNING": "[WARN]",
        "INFO": "[INFO]",
        "VARIANT": "",
    }

    @classmethod
    def get_icon(cls, icon_name: str, icon_mode: str = "emoji") -> str:
        """Get an icon for the given mode ("emoji" or "text")."""
        if icon_mode == "text":
            return cls._TEXT.get(icon_name, "")
        return str(getattr(cls, icon_name, ""))


VARIANTBOX_THEME = Theme(
    {
        "success": Colors.SUCCESS,
        "error": Colors.ERROR,
        "warning": Colors.WARNING,
        "info": Colors.INFO,
        "primary": Colors.PRIMARY,
        "muted": Colors.MUTED,
    }
)


class ThemedConsole:
    """Console wrapper with Variantbox theme applied."""

    def __init__(self, icon_mode: str = "emoji") -> None:
        self.console = Console(theme=VARIANTBOX_THEME, highlight=False)
        self.icon_mode = icon_mode

    def _print(self, icon_name: str, message: str, style: str) -> None:
        icon = Icons.get_icon(icon_name, self.icon_mode)
        text = f"{icon} {message}" if icon else message
        self.console.print(text, style=style, markup=False)

    def print_success(self, message: str) -> None:
        self._print("SUCCESS", message, "success")

    def print_error(self, message: str) -> None:
        self._print("ERROR", message, "error")

    def print_warning(self, message: str) -> None:
        self._print("WARNING", message, "warning")


class TableStyles:
    """Predefined table styling templates."""

    @staticmethod
    def create_basic_table(title: str = "", icon_mode: str = "emoji") -> Table:
        icon = Icons.get_icon("VARIANT", icon_mode)
        return Table(
            title=f"{icon} {title}" if icon and title else title,
            show_header=True,
            header_style=Colors.HEADER,
            border_style=Colors.SECONDARY,
        )

    @staticmethod
    def create_variant_table(icon_mode: str = "emoji") -> Table:
        """Create table for variant listings."""
        table = TableStyles.create_basic_table("Build Variants", icon_mode)
        table.add_column("Variant", style=Colors.PRIMARY, no_wrap=True)
        table.add_column("State", style="bold")
        table.add_column("Details", style=Colors.MUTED)
        return table

    @staticmethod
    def create_settings_table(title: str, icon_mode: str = "emoji") -> Table:
        """Create table for a resolved variant's settings."""
        table = TableStyles.create_basic_table(title, icon_mode)
        table.add_column("Setting", style=Colors.PRIMARY, no_wrap=True)
        table.add_column("Value", style=Colors.NORMAL)
        return table


def get_themed_console(icon_mode: str = "emoji") -> ThemedConsole:
    """Get a themed console instance."""
    return ThemedConsole(icon_mode=icon_mode)
