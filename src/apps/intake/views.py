"""Intake app views."""

import asyncio
import logging

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from django.views.generic import TemplateView
from django.views.static import serve

from .services import FORM_FIELDS, process_submission
from .store import empty_document, get_submission_store

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Request received. We will contact you soon."
FAILURE_MESSAGE = "Failed to process request"


class IndexView(TemplateView):
    """Public product request form."""

    template_name = "index.html"


class HealthView(View):
    """Liveness probe; never touches the store or the mail relay."""

    async def get(self, request: HttpRequest) -> JsonResponse:
        return JsonResponse({"status": "ok"})


@method_decorator(csrf_exempt, name="dispatch")
class SubmissionRequestsView(View):
    """Accept product requests (POST) and list stored ones (GET)."""

    async def get(self, request: HttpRequest) -> JsonResponse:
        """Return the whole submissions document; degrade to empty on failure."""
        store = get_submission_store()
        try:
            loop = asyncio.get_running_loop()
            data = await loop.run_in_executor(None, store.read_all)
        except Exception:
            logger.exception("Failed to read submissions from %s", store.path)
            data = empty_document()
        return JsonResponse(data)

    async def post(self, request: HttpRequest) -> JsonResponse:
        """Process a multipart product request."""
        try:
            fields = {key: request.POST.get(key) for key in FORM_FIELDS}
            files = request.FILES.getlist("images")
            await process_submission(
                fields,
                files,
                store=get_submission_store(),
                uploads_root=settings.UPLOADS_ROOT,
            )
        except Exception:
            logger.exception("Failed to process product request")
            return JsonResponse({"ok": False, "error": FAILURE_MESSAGE}, status=500)

        return JsonResponse({"ok": True, "message": SUCCESS_MESSAGE})


class UploadedFileView(View):
    """Serve a previously stored image from the uploads root."""

    def get(self, request: HttpRequest, path: str) -> HttpResponse:
        return serve(request, path, document_root=settings.UPLOADS_ROOT)
