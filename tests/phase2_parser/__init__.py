"""Phase 2: Pattern parser tests."""
