"""
pwcheck -- Password Strength Evaluator
======================================

Estimates how resistant a password is to guessing: brute-force entropy,
offline crack time, common-password detection (including simple
character substitutions), and a breach-corpus lookup that sends only a
five-character hash prefix over the network.

Modules:
    - pwcheck.core.engine: Evaluation pipeline orchestrator
    - pwcheck.core.models: Pydantic data models
    - pwcheck.analyzers: Individual evaluation stages
    - pwcheck.output: Console and report output
    - pwcheck.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Have I Been Pwned, Pwned Passwords API v3.
"""

__version__ = "1.0.0"
__tool_name__ = "pwcheck"
