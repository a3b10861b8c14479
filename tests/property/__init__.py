"""
Property-based testing suite for property-bag-kit.

Uses Hypothesis to check synthesizer guarantees and the bag contract the
coverage verifier relies on.
"""
