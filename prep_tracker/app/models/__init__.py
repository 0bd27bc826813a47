from prep_tracker.app.models.user import User
from prep_tracker.app.models.auth_session import AuthSession
from prep_tracker.app.models.profile import Profile
from prep_tracker.app.models.resource import Resource
from prep_tracker.app.models.roadmap_item import RoadmapItem
from prep_tracker.app.models.application import Application
from prep_tracker.app.models.interview import Interview
from prep_tracker.app.models.contact import Contact
from prep_tracker.app.models.practice_test import PracticeTest
from prep_tracker.app.models.past_question import PastQuestion
