# Import all command modules to ensure commands are registered.

import jumper.commands.bookmark_commands  # noqa: F401
import jumper.commands.setup_commands  # noqa: F401
