"""Course catalog module.

Provides:
- Category and course listing
- Course detail with ordered lessons
- Lesson detail with course and previous/next navigation
"""
