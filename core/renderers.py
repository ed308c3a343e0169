from rest_framework.renderers import BaseRenderer, JSONRenderer


class EnvelopeJSONRenderer(JSONRenderer):
    """
    Wraps successful payloads as {"success": true, "data": ...}.

    Error payloads are already shaped by core.exceptions.api_exception_handler,
    and views that build their own envelope (with a "success" key) pass through.
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = (renderer_context or {}).get('response')

        if data is None or response is None or response.status_code >= 400:
            return super().render(data, accepted_media_type, renderer_context)

        if not (isinstance(data, dict) and 'success' in data):
            data = {'success': True, 'data': data}
        return super().render(data, accepted_media_type, renderer_context)


class FileRenderer(BaseRenderer):
    """
    Lets file endpoints accept a matching Accept header. The views return
    finished HttpResponse objects, so only error payloads reach render().
    """
    charset = None

    def render(self, data, accepted_media_type=None, renderer_context=None):
        if data is None:
            return b''
        if isinstance(data, bytes):
            return data
        return JSONRenderer().render(data)


class PDFRenderer(FileRenderer):
    media_type = 'application/pdf'
    format = 'pdf'


class CSVRenderer(FileRenderer):
    media_type = 'text/csv'
    format = 'csv'


class XLSXRenderer(FileRenderer):
    media_type = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    format = 'xlsx'
