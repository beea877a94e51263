"""Phase 4: Dispatch, cache and serialized candidate tests.

Test Modules:
- test_dispatch.py: match() and Dispatcher ordering, failure and isolation
- test_pattern_cache.py: PatternCache and compile_pattern()
- test_serialized.py: match_json() / match_serialized() decoding
- test_config.py: MissMatchConfig environment handling
"""
