#!/usr/bin/env python3
"""
Static Search Index Builder
Main entry point following Clean Architecture principles

Architecture Layers:
- Domain: Documents, tokenization and index construction
- Application: Build orchestration
- Infrastructure: Content files, settings and artifact persistence
- Presentation: User interface (CLI)
"""

from src.presentation.cli import cli

if __name__ == "__main__":
    cli()
