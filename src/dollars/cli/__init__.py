"""
Command Line Interface Package

Thin command-line front end over the Money type.

Command Structure:
- dollars: Main entry point with utility commands (version, config)
- dollars parse / format / sum: Convert and total dollar amounts
"""
