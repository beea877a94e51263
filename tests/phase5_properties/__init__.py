"""Phase 5: Property-based tests for parser and matcher invariants."""
