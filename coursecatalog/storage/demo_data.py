from coursecatalog.models.course import Course, CourseLevel
from coursecatalog.models.user import User, UserRole


DEMO_COURSES = [
    Course(
        id='1',
        title='Introduction to Programming',
        description=(
            'Learn the fundamentals of programming with Python. '
            'Perfect for beginners who want to start their coding journey.'
        ),
        instructor='Dr. Sarah Johnson',
        duration='8 weeks',
        level=CourseLevel.BEGINNER,
        image='/src/assets/programming-course.jpg',
        price=199,
        category='Programming',
        modules=[
            'Introduction to Programming Concepts',
            'Variables and Data Types',
            'Control Structures',
            'Functions and Methods',
            'Object-Oriented Programming',
            'File Operations',
            'Error Handling',
            'Final Project',
        ],
        rating=4.8,
        students=2847,
    ),
    Course(
        id='2',
        title='Data Science & Machine Learning',
        description=(
            'Master data analysis, visualization, and machine learning algorithms '
            'using Python, pandas, and scikit-learn.'
        ),
        instructor='Prof. Michael Chen',
        duration='12 weeks',
        level=CourseLevel.INTERMEDIATE,
        image='/src/assets/data-science-course.jpg',
        price=299,
        category='Data Science',
        modules=[
            'Data Analysis with Pandas',
            'Data Visualization',
            'Statistical Analysis',
            'Machine Learning Fundamentals',
            'Supervised Learning',
            'Unsupervised Learning',
            'Deep Learning Basics',
            'Real-world Projects',
        ],
        rating=4.9,
        students=1923,
    ),
    Course(
        id='3',
        title='Full-Stack Web Development',
        description=(
            'Build modern web applications using React, Node.js, and MongoDB. '
            'From frontend to backend development.'
        ),
        instructor='Alex Rodriguez',
        duration='16 weeks',
        level=CourseLevel.ADVANCED,
        image='/src/assets/web-dev-course.jpg',
        price=399,
        category='Web Development',
        modules=[
            'HTML, CSS & JavaScript Fundamentals',
            'React.js Development',
            'State Management',
            'Backend with Node.js',
            'Database Design with MongoDB',
            'API Development',
            'Authentication & Security',
            'Deployment & DevOps',
        ],
        rating=4.7,
        students=3156,
    ),
]

DEMO_USERS = [
    User(
        id='admin1',
        email='admin@courseplatform.com',
        name='Admin User',
        role=UserRole.ADMIN,
    ),
    User(
        id='student1',
        email='student@demo.com',
        name='Demo Student',
        role=UserRole.STUDENT,
    ),
]
