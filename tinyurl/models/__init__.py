from tinyurl.models.url_document_model import URLDocument


__all__ = ['URLDocument']
