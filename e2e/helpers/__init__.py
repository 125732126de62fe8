# E2E Helpers
