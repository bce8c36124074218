"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: Normalization rules and page assembly
    - analysis/: Configuration, webhook client and two-report pipeline

Decoder stubs stand in for pypdf where page timing matters; the analysis
webhook is served by httpx.MockTransport.
"""
