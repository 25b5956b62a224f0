"""Main CLI entry point with command routing."""

import sys


def main() -> None:
    """Main CLI entry point."""
    # Check for CLI dependencies
    try:
        from oklch_names.cli.app import create_app
        app = create_app()
    except ImportError:
        # Minimal fallback without typer
        _fallback_main()
        return
    app()


def _fallback_main() -> None:
    """Minimal CLI when typer is not installed."""
    args = sys.argv[1:]

    if not args or args[0] in ("-h", "--help"):
        print("oklch-names - name and annotate oklch() colors")
        print()
        print("Install CLI extras for full functionality:")
        print("  pip install oklch-names[cli]")
        print()
        print("Basic usage (library mode):")
        print("  python -c \"import oklch_names as on; print(on.load_palette('palette.json').find_name(0.985, 0, 0))\"")
        return

    print(f"Unknown command: {args[0]}")
    print("Install CLI extras: pip install oklch-names[cli]")
    sys.exit(1)


if __name__ == "__main__":
    main()
