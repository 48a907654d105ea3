"""Built-in console commands: help, clear, exit, echo, version, execute_script, history."""
