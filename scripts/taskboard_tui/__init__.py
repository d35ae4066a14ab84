"""
Taskboard TUI - Terminal User Interface for the taskboard.

Architecture:
- providers.py: snapshot types + storage protocol
- board_provider.py: file-backed store and snapshot builder
- views/: Textual screen/widget components
- app.py: Main application entry point

The board itself (tasks.py), the key state machine (modes.py) and the date
pass (dates.py) live beside this package; the TUI only translates key events
and renders snapshots.
"""
