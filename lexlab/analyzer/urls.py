from django.urls import path
from . import views

urlpatterns = [
    path("analyze", views.analyze_api, name="api-analyze"),
    path("automaton/<str:kind>", views.automaton_api, name="api-automaton"),
    path("trace", views.trace_api, name="api-trace"),
    path("balance", views.balance_api, name="api-balance"),
]
