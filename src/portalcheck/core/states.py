"""State machine for a browser session's navigation state.

This module defines the SessionStateMachine that tracks where a Session is
in its lifecycle. It uses python-statemachine to enforce transition rules.

States:
- unloaded (initial): page created, nothing navigated yet
- loaded: the start page (or any page reached by direct navigation) is ready
- searched / navigated / filter_applied: reached by a mutating helper
- closed (final): resources released

Mutating transitions clear the ``settled`` flag. Only an explicit settle
wait sets it again. The machine records this but does not block helpers,
since the scenario is responsible for sequencing.
"""

from statemachine import State, StateMachine


class SessionStateMachine(StateMachine):
    """Navigation state of a single Session.

    Attributes:
        step: Counter that increments on each transition.
        settled: Whether the page has settled since the last mutating step.
    """

    unloaded = State(initial=True)
    loaded = State()
    searched = State()
    navigated = State()
    filter_applied = State()
    closed = State(final=True)

    # load: direct navigation to a URL
    load = (
        unloaded.to(loaded)
        | loaded.to.itself()
        | searched.to(loaded)
        | navigated.to(loaded)
        | filter_applied.to(loaded)
    )

    search = (
        loaded.to(searched)
        | searched.to.itself()
        | navigated.to(searched)
        | filter_applied.to(searched)
    )

    navigate = (
        loaded.to(navigated)
        | navigated.to.itself()
        | searched.to(navigated)
        | filter_applied.to(navigated)
    )

    apply_filter = (
        loaded.to(filter_applied)
        | filter_applied.to.itself()
        | searched.to(filter_applied)
        | navigated.to(filter_applied)
    )

    teardown = (
        unloaded.to(closed)
        | loaded.to(closed)
        | searched.to(closed)
        | navigated.to(closed)
        | filter_applied.to(closed)
    )

    def __init__(self) -> None:
        """Initialize the state machine with tracking variables."""
        self.step: int = 0
        self.settled: bool = False
        super().__init__()

    def mark_settled(self) -> None:
        """Record that the page reached its settle condition."""
        self.settled = True

    def after_transition(self, event: str, source: State, target: State) -> None:
        """Callback invoked after any state transition.

        Increments the step counter and clears ``settled`` for every
        transition except teardown.

        Args:
            event: The event that triggered this state change.
            source: The state we're transitioning from.
            target: The state we're transitioning to.
        """
        self.step += 1
        if event != "teardown":
            self.settled = False
