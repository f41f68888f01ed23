"""
Monitoring Utilities
Counters for dispatched messages and commands
"""

import time
from typing import Dict


class CommandStats:
    """Counts what the dispatcher has seen since start."""

    def __init__(self):
        self.start_time = time.time()
        self.metrics = {
            "messagesProcessed": 0,
            "commandsExecuted": 0,
            "unrecognized": 0,
            "errors": 0,
        }

    def record_message(self) -> None:
        """Record message processed."""
        self.metrics["messagesProcessed"] += 1

    def record_command(self) -> None:
        """Record command execution."""
        self.metrics["commandsExecuted"] += 1

    def record_unrecognized(self) -> None:
        self.metrics["unrecognized"] += 1

    def record_error(self) -> None:
        """Record error."""
        self.metrics["errors"] += 1

    def snapshot(self) -> Dict[str, int]:
        return dict(self.metrics)

    def format_status(self) -> str:
        """
        Format counters for a chat reply.

        Returns:
            Formatted status string
        """
        uptime = self.format_duration(int(time.time() - self.start_time))
        return (
            "📊 **Command Stats**\n\n"
            f"**Uptime:** {uptime}\n"
            f"**Messages:** {self.metrics['messagesProcessed']}\n"
            f"**Commands:** {self.metrics['commandsExecuted']}\n"
            f"**Unrecognized:** {self.metrics['unrecognized']}\n"
            f"**Errors:** {self.metrics['errors']}"
        )

    @staticmethod
    def format_duration(seconds: int) -> str:
        """
        Format duration in human readable format.

        Args:
            seconds: Duration in seconds

        Returns:
            Formatted duration string
        """
        if seconds < 60:
            return f"{seconds}s"
        if seconds < 3600:
            mins = seconds // 60
            secs = seconds % 60
            return f"{mins}m {secs}s"
        hours = seconds // 3600
        mins = (seconds % 3600) // 60
        return f"{hours}h {mins}m"
