"""
MissMatch type definitions.

This module exports the AST, match outcome and error types shared by the
parser, compiler and dispatcher.
"""

# AST types
from .ast import NodeKind, PatternAST, PatternNode

# Error types
from .errors import (
    CompileError,
    ConfigurationError,
    DecodeError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    MissMatchError,
    NonExhaustiveMatchError,
    ParseError,
)

# Outcome types
from .outcome import MatchOutcome, OutcomeKind

__all__ = [
    # AST types
    "NodeKind",
    "PatternAST",
    "PatternNode",
    # Error types
    "ErrorCode",
    "ErrorSeverity",
    "ErrorContext",
    "MissMatchError",
    "ParseError",
    "CompileError",
    "NonExhaustiveMatchError",
    "DecodeError",
    "ConfigurationError",
    # Outcome types
    "MatchOutcome",
    "OutcomeKind",
]
