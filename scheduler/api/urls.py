from django.urls import path
from .views import ReviewView, DueCardsView, FolderStatsView, FolderCardsView

urlpatterns = [
    path("reviews", ReviewView.as_view(), name="review"),
    path("folders/<str:folder_id>/due-cards", DueCardsView.as_view(), name="due-cards"),
    path("folders/<str:folder_id>/stats", FolderStatsView.as_view(), name="folder-stats"),
    path("folders/<str:folder_id>/cards", FolderCardsView.as_view(), name="folder-cards"),
]
