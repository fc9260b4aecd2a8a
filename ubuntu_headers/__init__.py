"""Resolve Ubuntu kernel header package URLs from a kernel release."""
