"""Service layer — operations the CLI exposes, each returning ServiceResult."""
