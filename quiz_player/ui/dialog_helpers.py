"""Helper functions for common dialog patterns in the player UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def confirm_exit_session(parent: QWidget) -> bool:
    """Ask before abandoning a quiz that is in progress.

    Args:
        parent: Parent widget for the dialog

    Returns:
        True if user confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        "Leave Quiz",
        "Your progress in this quiz will be lost. Leave anyway?",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget, title: str, message: str) -> None:
    """Show a blocking error dialog."""
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.information(parent, title, message)
