"""SQLAlchemy backend for parcel-tracker."""
