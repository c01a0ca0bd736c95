# Report formatting helpers
