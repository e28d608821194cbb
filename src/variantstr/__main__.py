"""Entry point for running variantstr as a module.

Usage:
    python -m variantstr [command] [options]

Example:
    python -m variantstr check schema.yaml
    python -m variantstr render Object '{Complex: [Green, {Circle: [2]}]}'
"""

from variantstr.cli import app

if __name__ == "__main__":
    app()
