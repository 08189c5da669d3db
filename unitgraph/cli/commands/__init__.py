"""
Click command implementations for the unitgraph CLI.

Each module corresponds to one command (e.g., plan.py implements
'unitgraph plan'). Commands are registered with the main group by
register_commands() in unitgraph.cli.
"""

from .classpath import classpath
from .config import config
from .packages import packages
from .plan import plan
from .publish import publish
from .units import units

COMMANDS = [
    units,
    classpath,
    plan,
    publish,
    packages,
    config,
]

__all__ = [
    "COMMANDS",
    "classpath",
    "config",
    "packages",
    "plan",
    "publish",
    "units",
]
