"""Allow ``python -m term_resume``."""

from term_resume.cli.main import main

main()
