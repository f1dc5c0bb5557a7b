"""
Event Topics for ptile

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>

Every topic in a category carries the same arguments so listeners can be
attached before the first message is sent.
"""

# Pane lifecycle events (published by hosts)
PANE_OPENED = "pane.opened"
"""Published when a host adds a pane to a frame. Params: frame, pane"""

PANE_CLOSED = "pane.closed"
"""Published when a host removes a pane from a frame. Params: frame, pane"""

# Layout notifications (published by the engine)
ARRANGED = "layout.arranged"
"""Published after an arrangement pass completes. Params: frame, panes"""

PARAMS_CHANGED = "layout.params_changed"
"""Published when nmaster or mfact changes. Params: nmaster, mfact"""

LAYOUT_CHANGED = "layout.changed"
"""Published when the active layout is replaced. Params: layout_name"""

# Focus notifications
FOCUS_CHANGED = "focus.changed"
"""Published when the engine moves focus. Params: frame, pane"""

# Command events (imperative - tell the engine to do something)
# These are triggered by key bindings in the host. Params: frame

CMD_ARRANGE = "cmd.arrange"
"""Command: Re-arrange the frame."""

CMD_SELECT_NEXT = "cmd.select_next"
"""Command: Focus next region."""

CMD_SELECT_PREV = "cmd.select_prev"
"""Command: Focus previous region."""

CMD_SWAP_NEXT = "cmd.swap_next"
"""Command: Swap focused pane with next."""

CMD_SWAP_PREV = "cmd.swap_prev"
"""Command: Swap focused pane with previous."""

CMD_ZOOM = "cmd.zoom"
"""Command: Promote focused pane to master position."""

CMD_INC_MASTER = "cmd.inc_master"
"""Command: Route one more pane to the master area."""

CMD_DEC_MASTER = "cmd.dec_master"
"""Command: Route one less pane to the master area."""

CMD_INC_MFACT = "cmd.inc_mfact"
"""Command: Grow the master area."""

CMD_DEC_MFACT = "cmd.dec_mfact"
"""Command: Shrink the master area."""
