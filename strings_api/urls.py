from django.urls import path
from .views import StringAnalyzerView, StringDetailView, NaturalLanguageFilterView

urlpatterns = [
    path('strings', StringAnalyzerView.as_view(), name='strings'),
    # must come before the <value> route or it would be read as a value
    path('strings/filter-by-natural-language',
         NaturalLanguageFilterView.as_view(), name='strings-nl-filter'),
    # <path:> so values containing "/" (sent as %2F) still resolve
    path('strings/<path:value>', StringDetailView.as_view(), name='string-detail'),
]
