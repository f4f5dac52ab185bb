import unicodedata
from urllib.parse import quote

def attachment_headers(filename):
    """Content-Disposition for a download, with an RFC 5987 fallback for non-ASCII names"""
    simple = unicodedata.normalize('NFKD', filename).encode('ascii', 'ignore').decode('ascii')
    simple = simple.replace('"', '').replace('\\', '')
    if simple == filename:
        value = f'attachment; filename="{filename}"'
    else:
        value = f"attachment; filename=\"{simple}\"; filename*=UTF-8''{quote(filename, safe='')}"
    return {'Content-Disposition': value}
