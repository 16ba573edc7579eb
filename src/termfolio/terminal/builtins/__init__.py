"""
Built-in terminal commands.

Each module registers its commands on ``command_registry`` when imported.
Import order is registration order, which is the order ``help`` lists them.
"""

from termfolio.terminal.builtins import (  # noqa: F401
    about,
    projects,
    skills,
    experience,
    certifications,
    github,
    contact,
    history,
    control,
    help,
)
