"""privateroom - ephemeral group rooms for chat bots."""

__version__ = "0.1.0"
__logo__ = "🚪"
