from pydantic import BaseModel, Field

DEFAULT_CDN_URL = "https://cdn.tiny.cloud/1/{api_key}/tinymce/6/tinymce.min.js"

class EditorRules(BaseModel):
    cloud_api_key: str | None = None
    cdn_url_template: str = DEFAULT_CDN_URL
    local_bundle_url: str = "/static/tinymce/tinymce.min.js"

    def script_url(self) -> str:
        if self.cloud_api_key:
            return self.cdn_url_template.format(api_key=self.cloud_api_key)
        return self.local_bundle_url

    def skin(self) -> str:
        return "oxide" if self.cloud_api_key else "craft"

class PathsRules(BaseModel):
    config_dir: str = "config"
    translations_dir: str = "translations"

class I18nRules(BaseModel):
    default_language: str = "en-US"
    rtl_languages: list[str] = Field(
        default_factory=lambda: ["ar", "dv", "fa", "he", "ku", "ps", "sd", "ug", "ur", "yi"]
    )

class CommerceRules(BaseModel):
    plugin_handle: str = "commerce"

class PluginRules(BaseModel):
    editor: EditorRules = Field(default_factory=EditorRules)
    paths: PathsRules = Field(default_factory=PathsRules)
    i18n: I18nRules = Field(default_factory=I18nRules)
    commerce: CommerceRules = Field(default_factory=CommerceRules)
