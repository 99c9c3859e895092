"""
Use Cases

Organized by the entity they act on:
- organizations/: Organizations and their members
- boards/: Boards
- lists/: Lists within a board
- cards/: Cards within a list and their activity history
- invites/: Invitation lifecycle

Import from the subpackages.
"""
