"""Command-line entry point for the Solana API server."""

from solana_api.main import run_server


def main():
    """Run the Solana API server."""
    run_server()


if __name__ == "__main__":
    main()
