"""
Built-in commands package.

Each group is a subdirectory and each command a module inside it, loaded by
path through the command loader. The same layout works in a user commands
directory, with these modules serving as the reload fallback.
"""
