from django.core.paginator import EmptyPage, Page, PageNotAnInteger
from rest_framework.exceptions import ValidationError
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class MedicinePagination(PageNumberPagination):
    """
    ``?page=&limit=`` paging rendered as ``{medicines, total, pages, page, limit}``.

    A page past the last one is an empty page rather than a 404, so clients
    still receive the totals.
    """

    page_size = 10
    page_size_query_param = "limit"
    max_page_size = 100

    def paginate_queryset(self, queryset, request, view=None):
        self.request = request
        paginator = self.django_paginator_class(queryset, self.get_page_size(request))
        page_number = self.get_page_number(request, paginator)
        try:
            self.page = paginator.page(page_number)
        except PageNotAnInteger:
            raise ValidationError({"page": "page must be a positive integer."})
        except EmptyPage:
            number = int(page_number)
            if number < 1:
                raise ValidationError({"page": "page must be a positive integer."})
            self.page = Page([], number, paginator)
        return list(self.page)

    def get_paginated_response(self, data):
        return Response({
            "medicines": data,
            "total": self.page.paginator.count,
            "pages": self.page.paginator.num_pages,
            "page": self.page.number,
            "limit": self.page.paginator.per_page,
        })
