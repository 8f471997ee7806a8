"""ViewModel package for UI state and command surfaces.

Call context:
    ``loginflow.app.environment`` builds concrete viewmodels from this
    package; views bind their callbacks to the exposed commands.

Dependencies:
    Modules in this package depend on domain ports and the login use case
    only. Transport and timer implementations remain in adapters.

Responsibilities:
    - Expose UI state and command intent callbacks.
    - Notify subscribers after every state change.
    - Keep MVVM boundaries explicit by avoiding transport or timer logic.
"""
