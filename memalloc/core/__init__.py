"""Core allocation analysis: models, regions, byte units and the reporter."""
