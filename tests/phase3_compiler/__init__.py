"""Phase 3: Compiler and structural predicate tests."""
