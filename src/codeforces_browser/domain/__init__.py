"""Domain layer: models, rules and state that do no I/O."""
