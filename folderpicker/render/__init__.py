"""Frame rendering for the picker.

Every state change redraws the whole frame. ``frame_lines`` is pure and
returns styled lines; ``render_frame`` clips them to the terminal width and
writes them to the interactive stream.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ..mutations import archive_destination
from ..navigation import ConfirmArchive, ConfirmDelete, CreateFolder, Help, NavigationState
from ..paths import display_path
from ..ui_theme import DEFAULT_THEME, UITheme
from .ansi import clip_ansi_line
from .help import help_lines

FILTER_PLACEHOLDER = "Type to filter..."
FOOTER_HINT = " ↑↓ nav • Enter open • Tab select • ^N new • F1 help "


@dataclass(frozen=True)
class RenderContext:
    """Settings that shape a frame but are not part of navigation state."""

    theme: UITheme = DEFAULT_THEME
    home: Path | None = None
    archive_dir: Path | None = None
    width: int = 80

    def show_path(self, path: Path) -> str:
        return display_path(path, self.home)

    def archive_label(self) -> str:
        if self.archive_dir is None:
            return "archive unavailable"
        return self.show_path(self.archive_dir)


def status_line(state: NavigationState, theme: UITheme) -> str:
    """Return the error, the active filter, or the filter placeholder."""
    if state.error:
        return f"{theme.error}{state.error}{theme.reset}"
    if state.filter_text:
        return f"{theme.filter_query}Filter: {state.filter_text}_{theme.reset}"
    return f"{theme.filter_hint}{FILTER_PLACEHOLDER}{theme.reset}"


def browsing_lines(state: NavigationState, context: RenderContext) -> list[str]:
    theme = context.theme
    lines = [
        f"{theme.path}{context.show_path(state.root)}{theme.reset}",
        status_line(state, theme),
        "",
    ]

    filtered = state.filtered
    visible = state.visible_lines
    start = state.offset
    end = min(start + visible, len(filtered))
    for idx in range(start, end):
        name = filtered[idx].display_name
        if idx == state.cursor:
            lines.append(f"{theme.cursor}> {name}{theme.reset}")
        else:
            lines.append(f"  {name}")

    if len(filtered) > visible:
        lines.append(f"{theme.scroll_hint}({start + 1}-{end} of {len(filtered)}){theme.reset}")
    else:
        lines.append("")
    lines.append(f"{theme.footer}{FOOTER_HINT}{theme.reset}")
    return lines


def confirm_delete_lines(target: Path, context: RenderContext) -> list[str]:
    theme = context.theme
    return [
        "",
        f"  {theme.delete_title}Delete folder?{theme.reset}",
        "",
        f"  {theme.emphasis}{context.show_path(target)}{theme.reset}",
        "",
        f"  {theme.dim}This will permanently delete the folder{theme.reset}",
        f"  {theme.dim}and all its contents!{theme.reset}",
        "",
        f"  {theme.footer} y = delete • n/Esc = cancel {theme.reset}",
        "",
    ]


def create_folder_lines(root: Path, draft: str, context: RenderContext) -> list[str]:
    theme = context.theme
    parent_label = context.show_path(root).rstrip("/")
    return [
        "",
        f"  {theme.create_title}Create new folder{theme.reset}",
        "",
        f"  {theme.dim}in {parent_label}/{theme.reset}",
        "",
        f"  {theme.emphasis}Name: {draft}_{theme.reset}",
        "",
        f"  {theme.footer} Enter = create • Esc = cancel {theme.reset}",
        "",
    ]


def confirm_archive_lines(target: Path, context: RenderContext) -> list[str]:
    theme = context.theme
    if context.archive_dir is None:
        destination = context.archive_label()
    else:
        destination = context.show_path(archive_destination(target, context.archive_dir))
    return [
        "",
        f"  {theme.archive_title}Move to Archive?{theme.reset}",
        "",
        f"  {theme.emphasis}From:{theme.reset} {context.show_path(target)}",
        f"  {theme.emphasis}To:{theme.reset}   {destination}",
        "",
        f"  {theme.dim}The folder will be moved to your archive.{theme.reset}",
        "",
        f"  {theme.footer} y = archive • n/Esc = cancel {theme.reset}",
        "",
    ]


def frame_lines(state: NavigationState, context: RenderContext) -> list[str]:
    """Return the styled lines for whichever view ``state`` calls for."""
    modal = state.modal
    if isinstance(modal, Help):
        return help_lines(context.theme, context.archive_label())
    if isinstance(modal, ConfirmDelete):
        return confirm_delete_lines(modal.target, context)
    if isinstance(modal, ConfirmArchive):
        return confirm_archive_lines(modal.target, context)
    if isinstance(modal, CreateFolder):
        return create_folder_lines(state.root, modal.draft, context)
    return browsing_lines(state, context)


def render_frame(fd: int, state: NavigationState, context: RenderContext) -> None:
    """Clear the screen and write the current frame to ``fd``."""
    out: list[str] = ["\033[H\033[J"]
    line_width = max(1, context.width - 1)
    for row, line in enumerate(frame_lines(state, context)):
        if row:
            out.append("\r\n")
        clipped = clip_ansi_line(line, line_width)
        out.append(clipped)
        if "\033" in clipped:
            out.append("\033[0m")
    os.write(fd, "".join(out).encode("utf-8", errors="replace"))


__all__ = [
    "FILTER_PLACEHOLDER",
    "FOOTER_HINT",
    "RenderContext",
    "browsing_lines",
    "confirm_archive_lines",
    "confirm_delete_lines",
    "create_folder_lines",
    "frame_lines",
    "render_frame",
    "status_line",
]
