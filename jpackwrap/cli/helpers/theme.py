"""Theme for consistent Rich styling across CLI commands."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme


class Colors:
    """Standardized color palette for CLI output."""

    SUCCESS = "bold green"
    ERROR = "bold red"
    WARNING = "bold yellow"
    INFO = "bold blue"

    PRIMARY = "cyan"
    MUTED = "dim"
    HEADER = "bold cyan"

    AVAILABLE = "green"
    UNAVAILABLE = "red"


class Icons:
    """Standardized icons for different message types."""

    SUCCESS = "✅"
    ERROR = "❌"
    WARNING = "⚠️"
    INFO = "ℹ️"
    BULLET = "•"
    BUILD = "🔨"
    PACKAGE = "📦"
    SYSTEM = "🖥️"

    _TEXT_FALLBACKS = {
        "SUCCESS": "[OK]",
        "ERROR": "[ERROR]",
        "WARNING": "[WARN]",
        "INFO": "[INFO]",
        "BULLET": "-",
        "BUILD": "[BUILD]",
        "PACKAGE": "[PKG]",
        "SYSTEM": "[SYS]",
    }

    @classmethod
    def get_icon(cls, icon_name: str, icon_mode: str = "emoji") -> str:
        """Get icon based on the specified mode ("emoji" or "text")."""
        if icon_mode == "emoji":
            return getattr(cls, icon_name, "")
        return cls._TEXT_FALLBACKS.get(icon_name, f"[{icon_name}]")

    @classmethod
    def format_with_icon(
        cls, icon_name: str, text: str, icon_mode: str = "emoji"
    ) -> str:
        icon = cls.get_icon(icon_name, icon_mode)
        return f"{icon} {text}" if icon else text


JPACKWRAP_THEME = Theme(
    {
        "success": Colors.SUCCESS,
        "error": Colors.ERROR,
        "warning": Colors.WARNING,
        "info": Colors.INFO,
        "primary": Colors.PRIMARY,
        "muted": Colors.MUTED,
        "header": Colors.HEADER,
        "available": Colors.AVAILABLE,
        "unavailable": Colors.UNAVAILABLE,
    }
)


class ThemedConsole:
    """Console wrapper with the jpackwrap theme applied."""

    def __init__(self, icon_mode: str = "emoji", stderr: bool = False) -> None:
        self.console = Console(theme=JPACKWRAP_THEME, stderr=stderr, soft_wrap=True)
        self.icon_mode = icon_mode

    def print_success(self, message: str) -> None:
        icon = Icons.get_icon("SUCCESS", self.icon_mode)
        self.console.print(escape(f"{icon} {message}"), style="success")

    def print_error(self, message: str) -> None:
        icon = Icons.get_icon("ERROR", self.icon_mode)
        self.console.print(escape(f"{icon} {message}"), style="error")

    def print_warning(self, message: str) -> None:
        icon = Icons.get_icon("WARNING", self.icon_mode)
        self.console.print(escape(f"{icon} {message}"), style="warning")

    def print_info(self, message: str) -> None:
        icon = Icons.get_icon("INFO", self.icon_mode)
        self.console.print(escape(f"{icon} {message}"), style="info")

    def print_list_item(self, message: str, indent: int = 1) -> None:
        spacing = "  " * indent
        bullet = Icons.get_icon("BULLET", self.icon_mode)
        self.console.print(escape(f"{spacing}{bullet} {message}"), style="primary")


def create_status_table(title: str, icon: str = "", icon_mode: str = "emoji") -> Table:
    """Create a component/status/details table."""
    full_title = Icons.format_with_icon(icon, title, icon_mode) if icon else title
    table = Table(title=full_title, show_header=True, header_style=Colors.HEADER)
    table.add_column("Component", style=Colors.PRIMARY, no_wrap=True)
    table.add_column("Status", style="bold")
    table.add_column("Details", style=Colors.MUTED)
    return table


def format_availability_status(available: bool, icon_mode: str = "emoji") -> str:
    if available:
        return Icons.format_with_icon(
            "SUCCESS", "[available]Available[/available]", icon_mode
        )
    return Icons.format_with_icon(
        "ERROR", "[unavailable]Missing[/unavailable]", icon_mode
    )


def get_themed_console(icon_mode: str = "emoji", stderr: bool = False) -> ThemedConsole:
    """Get a themed console instance."""
    return ThemedConsole(icon_mode=icon_mode, stderr=stderr)
