"""HTTP gateway for Botter."""
