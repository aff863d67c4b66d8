"""User Store service: owns user records."""
