from bs4 import BeautifulSoup
from pydantic import BaseModel


def _script_text(tag) -> str | None:
    if tag is None:
        return None
    return str(tag.string or "")


class RawPageSnapshot(BaseModel):
    model_config = {"frozen": True}

    url: str
    html: str = ""
    title: str | None = None
    structured_metadata_text: str | None = None  # application/ld+json
    boot_data_text: str | None = None  # __NEXT_DATA__

    @classmethod
    def from_html(cls, url: str, html: str, title: str | None = None) -> "RawPageSnapshot":
        """Build a snapshot, pulling the embedded script payloads out of the DOM."""
        soup = BeautifulSoup(html, "html.parser")
        ld = soup.find("script", attrs={"type": "application/ld+json"})
        boot = soup.find("script", id="__NEXT_DATA__")
        return cls(
            url=url,
            html=html,
            title=title,
            structured_metadata_text=_script_text(ld),
            boot_data_text=_script_text(boot),
        )
