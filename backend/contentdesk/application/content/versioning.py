from contentdesk.utils.time import isoformat


def version_entry(html, now):
    return {"content": html, "date": isoformat(now)}
