"""CLI entry point for the orchestrator submitter.

Parses the command line flags, builds one ``RequestClient`` and posts a single
work order to the Orchestrator server. Connection defaults come from
``orchestrator_submit/configs/config.yml`` and the environment (``.env`` is
honoured); flags override both.
"""

from dotenv import load_dotenv

from orchestrator_submit.cli.main import main

# Load environment variables from .env file (force reload)
load_dotenv(override=True)


if __name__ == "__main__":
    main()
