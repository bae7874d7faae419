"""CourseHub: online course catalog and lesson progress tracker."""

__version__ = "0.1.0"
