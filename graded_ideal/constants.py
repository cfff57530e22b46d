# graded_ideal/constants.py
"""
Graded Ideal Constants

Defaults shared by the engine configuration:

PRIMALITY ENGINE
- DEFAULT_MAX_CRITICAL_PAIRS: Upper bound on homogeneous pairs handed to the oracle
- DEFAULT_VERIFY_ORACLE: Cross-check every oracle answer against ideal membership

ENVIRONMENT
- ENV_MAX_PAIRS / ENV_VERIFY_ORACLE: Variables read by EngineConfig.from_env
"""


# =============================================================================
# Primality Engine
# =============================================================================

# Each generator at index k contributes one pair per decomposition k = i + j,
# so x^d alone yields d + 1 pairs over the natural numbers.
DEFAULT_MAX_CRITICAL_PAIRS = 100_000

DEFAULT_VERIFY_ORACLE = True


# =============================================================================
# Environment
# =============================================================================

ENV_MAX_PAIRS = "GRADED_IDEAL_MAX_PAIRS"
ENV_VERIFY_ORACLE = "GRADED_IDEAL_VERIFY_ORACLE"

TRUTHY = frozenset({"1", "true", "yes", "on"})
FALSY = frozenset({"0", "false", "no", "off"})
