"""Post-init run instructions."""

from __future__ import annotations

import os
from pathlib import Path

from rich.console import Console


def print_run_instructions(project_dir: str | Path, project_name: str, *, console: Console | None = None) -> None:
    console = console or Console()
    absolute_project_dir = Path(project_dir).resolve()
    xcode_project = absolute_project_dir / "ios" / f"{project_name}.xcodeproj"
    relative_xcode_project = os.path.relpath(xcode_project, Path.cwd())

    console.print()
    console.print("  [cyan]Run instructions for [bold]iOS[/bold][/cyan]:")
    console.print(f"    • cd {absolute_project_dir} && react-native run-ios", highlight=False)
    console.print("    - or -")
    console.print(f"    • Open {relative_xcode_project} in Xcode", highlight=False)
    console.print("    • Hit the Run button")
    console.print()
    console.print("  [green]Run instructions for [bold]Android[/bold][/green]:")
    console.print("    • Have an Android emulator running (quickest way to get started), or a device connected.")
    console.print(f"    • cd {absolute_project_dir} && react-native run-android", highlight=False)
    console.print()
