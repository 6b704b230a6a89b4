"""Third-party aviation data services (weather, flight tracking)."""
