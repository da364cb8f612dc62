from django.urls import path
from .views import (
    health,
    solve_jumble,
    dictionary_info,
)

urlpatterns = [
    path('health/', health, name='Health'),
    path('jumble/solve', solve_jumble, name='solve-jumble'),
    path('jumble/dictionary', dictionary_info, name='dictionary-info'),
]
