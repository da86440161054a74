"""Default WPS PIN derivation from access point BSSIDs."""
