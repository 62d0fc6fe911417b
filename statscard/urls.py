"""
URL configuration for the stats card app.
"""
from django.urls import path
from . import views

urlpatterns = [
    path('api/', views.card_view, name='card_api'),
    path('card/<str:username>.svg', views.card_view, name='card'),
]
