"""Random selection and pattern search over a corpus."""
