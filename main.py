#!/usr/bin/env python3
"""Main entry point for shared-validators: serve the API."""

from shared_validators.api.gateway import run


def main():
    """Main entry point."""
    run()


if __name__ == "__main__":
    main()
