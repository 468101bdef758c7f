"""SkyDeal core - domain schemas, airport directory and geodesy helpers."""
