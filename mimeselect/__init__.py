# ==============================================
# mimeselect — Default Application Picker
# ==============================================
#
# Package Structure (2 Stages + Orchestrator):
#
# mimeselect/
# ├── discovery/        # Stage 1: Locate desktop files, aggregate MIME types
# ├── resolution/       # Stage 2: Pick one handler per type, register it
# ├── config.py         # Configuration management
# ├── log.py            # Logging setup (stderr)
# ├── errors.py         # Exception hierarchy
# ├── terminal.py       # TTY check + cursor restoration guard
# ├── app.py            # Orchestrator class
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
