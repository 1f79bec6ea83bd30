"""
Field API.

Endpoints a host CMS calls while rendering and saving a TinyMCE field.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from tinymce_field.adapters.config_files import FileSystemConfigStore
from tinymce_field.adapters.translations import YamlTranslator
from tinymce_field.api.deps import get_config_store, get_rules, get_translator
from tinymce_field.api.schemas import (
    EditorConfigRequest,
    EditorConfigResponse,
    SerializeRequest,
    SerializeResponse,
    SettingsFormRequest,
    SettingsFormResponse,
    StaticHtmlRequest,
    StaticHtmlResponse,
)
from tinymce_field.components.field import (
    EditorConfigInput,
    SerializeValueInput,
    SettingsFormInput,
    StaticHtmlInput,
    display_name,
    run_editor_config,
    run_serialize,
    run_settings_form,
    run_static_html,
)
from tinymce_field.rules.models import PluginRules

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/editor-config",
    response_model=EditorConfigResponse,
    summary="Build editor init data",
)
def editor_config(
    request: EditorConfigRequest,
    rules: PluginRules = Depends(get_rules),
    config_files: FileSystemConfigStore = Depends(get_config_store),
    translator: YamlTranslator = Depends(get_translator),
) -> EditorConfigResponse:
    """
    Build the client init object, script URL and input markup for a field.
    """
    try:
        output = run_editor_config(
            EditorConfigInput(
                field=request.field,
                element=request.element,
                value=request.value,
                language=request.language,
                namespace=request.namespace,
            ),
            host=request.host.to_host(),
            actor=request.host.to_actor(),
            config_files=config_files,
            translator=translator,
            rules=rules,
        )
    except ValueError as err:
        logger.error("Editor config failed for field %s: %s", request.field.handle, err)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(err),
        ) from err

    return EditorConfigResponse(
        settings=output.settings,
        script_url=output.script_url,
        input_html=output.input_html,
        init_js=output.init_js,
    )


@router.post(
    "/settings-form",
    response_model=SettingsFormResponse,
    summary="Build field settings form data",
)
def settings_form(
    request: SettingsFormRequest,
    config_files: FileSystemConfigStore = Depends(get_config_store),
    translator: YamlTranslator = Depends(get_translator),
) -> SettingsFormResponse:
    if request.language:
        translator = translator.with_language(request.language)

    output = run_settings_form(
        SettingsFormInput(field=request.field, language=request.language),
        host=request.host.to_host(),
        config_files=config_files,
        translator=translator,
    )

    return SettingsFormResponse(
        display_name=display_name(translator),
        settings=output.settings,
        tinymce_config_options=output.tinymce_config_options,
        purifier_config_options=output.purifier_config_options,
        volume_options=output.volume_options,
        transform_options=output.transform_options,
        default_transform_options=output.default_transform_options,
    )


@router.post("/serialize", response_model=SerializeResponse, summary="Prepare a value for storage")
def serialize(request: SerializeRequest) -> SerializeResponse:
    output = run_serialize(SerializeValueInput(field=request.field, value=request.value))
    return SerializeResponse(value=output.value)


@router.post("/static-html", response_model=StaticHtmlResponse, summary="Read-only rendering")
def static_html(request: StaticHtmlRequest) -> StaticHtmlResponse:
    output = run_static_html(StaticHtmlInput(value=request.value))
    return StaticHtmlResponse(html=output.html)
