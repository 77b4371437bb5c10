"""Reference implementation of the external todo worker.

Used for local runs and integration tests. Any executable that speaks the
same subcommand protocol can replace it.
"""
