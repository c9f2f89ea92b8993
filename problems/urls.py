from rest_framework.routers import SimpleRouter

from .views import ProblemsViewSet

app_name = "problems"

router = SimpleRouter()
router.register(r"", ProblemsViewSet, basename="problems")

urlpatterns = router.urls
