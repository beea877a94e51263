"""Phase 1: Core type tests."""
