"""Pure tree and text transformations: path rules, sorting, comments.

Nothing here touches files, settings, or output; inputs are plain
``dict``/``list`` trees and strings.
"""
