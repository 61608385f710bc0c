"""Pure graph domain: value types and algorithms with no infrastructure dependencies."""
