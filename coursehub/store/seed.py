"""Demo catalog loaded into a fresh store on startup.

Everything goes through :class:`StorageService`, so seeded entities get ids
from the store's own generators (starting at 1) and the demo enrollments and
progress records pass the same checks as live requests.
"""

import structlog

from .memory import MemoryStore
from .schemas import (
    LessonProgressUpdate,
    NewCategory,
    NewCourse,
    NewEnrollment,
    NewLesson,
    NewUser,
)
from .service import StorageService


logger = structlog.get_logger(__name__)

_IMAGE = (
    "https://images.unsplash.com/{}"
    "?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=400"
)

DEMO_USER = NewUser(username="johndoe", password="password123", name="John Doe")

DEMO_CATEGORIES = [
    NewCategory(name="Web Development", color="primary"),
    NewCategory(name="Data Science", color="purple"),
    NewCategory(name="Design", color="pink"),
    NewCategory(name="Marketing", color="orange"),
    NewCategory(name="Mobile Development", color="green"),
    NewCategory(name="Security", color="red"),
]

DEMO_COURSES = [
    NewCourse(
        title="Complete React Development",
        description=(
            "Master modern React development with hooks, context, and best "
            "practices for building scalable applications."
        ),
        full_description=(
            "This comprehensive React course covers everything from fundamentals "
            "to advanced concepts. You'll learn React hooks, context API, state "
            "management, and modern development patterns. Build real-world "
            "projects and master the skills needed for professional React "
            "development."
        ),
        instructor="Sarah Johnson",
        category_id=1,
        price="$49",
        duration="12h 30m",
        level="Beginner",
        rating="4.8",
        student_count="2.4k students",
        image_url=_IMAGE.format("photo-1633356122102-3fe601e05bd2"),
        features=[
            "12.5 hours on-demand video",
            "15 downloadable resources",
            "10 coding exercises",
            "Certificate of completion",
        ],
    ),
    NewCourse(
        title="Python Data Analysis",
        description=(
            "Learn data analysis, visualization, and machine learning using "
            "Python, pandas, and scikit-learn."
        ),
        full_description=(
            "Dive deep into data science with Python. This course covers data "
            "manipulation with pandas, visualization with matplotlib and seaborn, "
            "and machine learning with scikit-learn. Perfect for aspiring data "
            "scientists and analysts."
        ),
        instructor="Dr. Michael Chen",
        category_id=2,
        price="$69",
        duration="18h 20m",
        level="Intermediate",
        rating="4.9",
        student_count="1.8k students",
        image_url=_IMAGE.format("photo-1526379095098-d400fd0bf935"),
        features=[
            "18 hours on-demand video",
            "25 downloadable resources",
            "15 hands-on projects",
            "Certificate of completion",
        ],
    ),
    NewCourse(
        title="UX/UI Design Fundamentals",
        description=(
            "Master user experience and interface design principles, prototyping, "
            "and design thinking methodology."
        ),
        full_description=(
            "Learn the complete UX/UI design process from research to final "
            "implementation. This course covers user research, wireframing, "
            "prototyping, visual design, and usability testing. Perfect for "
            "aspiring designers and developers."
        ),
        instructor="Emily Rodriguez",
        category_id=3,
        price="$59",
        duration="14h 15m",
        level="Beginner",
        rating="4.7",
        student_count="3.1k students",
        image_url=_IMAGE.format("photo-1586717791821-3f44a563fa4c"),
        features=[
            "14 hours on-demand video",
            "20 downloadable resources",
            "8 design projects",
            "Certificate of completion",
        ],
    ),
    NewCourse(
        title="Digital Marketing Strategy",
        description=(
            "Learn comprehensive digital marketing strategies including SEO, "
            "social media, and analytics."
        ),
        full_description=(
            "Master digital marketing from strategy to execution. This course "
            "covers SEO, content marketing, social media marketing, email "
            "marketing, and analytics. Learn how to create and execute "
            "successful digital marketing campaigns."
        ),
        instructor="David Thompson",
        category_id=4,
        price="$39",
        duration="10h 45m",
        level="Beginner",
        rating="4.6",
        student_count="4.2k students",
        image_url=_IMAGE.format("photo-1460925895917-afdab827c52f"),
        features=[
            "10 hours on-demand video",
            "12 downloadable resources",
            "5 marketing projects",
            "Certificate of completion",
        ],
    ),
    NewCourse(
        title="React Native Development",
        description=(
            "Build cross-platform mobile applications using React Native and "
            "modern development practices."
        ),
        full_description=(
            "Learn to build native mobile apps for iOS and Android using React "
            "Native. This course covers navigation, state management, API "
            "integration, and publishing to app stores."
        ),
        instructor="Alex Kim",
        category_id=5,
        price="$79",
        duration="20h 30m",
        level="Intermediate",
        rating="4.8",
        student_count="1.5k students",
        image_url=_IMAGE.format("photo-1512941937669-90a1b58e7e9c"),
        features=[
            "20 hours on-demand video",
            "30 downloadable resources",
            "12 mobile projects",
            "Certificate of completion",
        ],
    ),
    NewCourse(
        title="Cybersecurity Fundamentals",
        description=(
            "Learn network security, ethical hacking, and threat assessment "
            "techniques."
        ),
        full_description=(
            "Comprehensive cybersecurity course covering network security, "
            "penetration testing, incident response, and security best "
            "practices. Perfect for IT professionals and security enthusiasts."
        ),
        instructor="Maria Santos",
        category_id=6,
        price="$89",
        duration="16h 45m",
        level="Intermediate",
        rating="4.9",
        student_count="2.2k students",
        image_url=_IMAGE.format("photo-1550751827-4bd374c3f58b"),
        features=[
            "16 hours on-demand video",
            "20 downloadable resources",
            "10 security labs",
            "Certificate of completion",
        ],
    ),
]

# Only the first course ships with lessons
DEMO_LESSONS = [
    NewLesson(
        course_id=1,
        title="Introduction to React",
        duration="15:30",
        video_url="",
        content=(
            "In this lesson, we'll explore what React is and why it's become one "
            "of the most popular JavaScript libraries for building user "
            "interfaces. React was created by Facebook and has revolutionized "
            "how we think about building web applications."
        ),
        order_index=1,
    ),
    NewLesson(
        course_id=1,
        title="Setting up Development Environment",
        duration="12:15",
        video_url="",
        content=(
            "Learn how to set up your development environment for React "
            "development. We'll install Node.js, create a new React project, and "
            "explore the project structure."
        ),
        order_index=2,
    ),
    NewLesson(
        course_id=1,
        title="Understanding Components and JSX",
        duration="25:45",
        video_url="",
        content=(
            "Components are the building blocks of React applications. In this "
            "lesson, we'll learn about functional and class components, and how "
            "JSX makes it easy to write component templates."
        ),
        order_index=3,
    ),
    NewLesson(
        course_id=1,
        title="State and Props",
        duration="30:20",
        video_url="",
        content=(
            "Understanding state and props is crucial for React development. "
            "We'll learn how to manage component state and pass data between "
            "components using props."
        ),
        order_index=4,
    ),
    NewLesson(
        course_id=1,
        title="Event Handling",
        duration="18:10",
        video_url="",
        content=(
            "Learn how to handle user interactions in React applications. We'll "
            "cover event handlers, form handling, and best practices for "
            "managing user input."
        ),
        order_index=5,
    ),
]

DEMO_ENROLLMENTS = [
    NewEnrollment(user_id=1, course_id=1),
    NewEnrollment(user_id=1, course_id=2),
]

DEMO_PROGRESS = [
    LessonProgressUpdate(user_id=1, lesson_id=1, completed=True),
    LessonProgressUpdate(user_id=1, lesson_id=2, completed=True),
    LessonProgressUpdate(user_id=1, lesson_id=3, completed=False),
]


def seed_store(store: MemoryStore) -> StorageService:
    """Load the demo catalog into ``store``.

    Meant for an empty store: the demo enrollments and progress refer to the
    user, courses and lessons by the ids they get there.

    Returns:
        A StorageService bound to ``store``
    """
    storage = StorageService(store)

    storage.create_user(DEMO_USER)
    for category in DEMO_CATEGORIES:
        storage.create_category(category)
    for course in DEMO_COURSES:
        storage.create_course(course)
    for lesson in DEMO_LESSONS:
        storage.create_lesson(lesson)
    for enrollment in DEMO_ENROLLMENTS:
        storage.create_enrollment(enrollment)
    for progress in DEMO_PROGRESS:
        storage.upsert_lesson_progress(progress)

    logger.info("demo_data_seeded", **store.counts())
    return storage
