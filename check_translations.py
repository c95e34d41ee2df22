from quotebook.core.config import settings
from quotebook.services.i18n import Translator

translator = Translator.from_file(settings.TRANSLATIONS_PATH)
reference = settings.DEFAULT_LANG

print(f"Languages: {', '.join(translator.languages()) or '(none)'}")
for lang, keys in translator.missing_keys(reference).items():
    if keys:
        print(f"[{lang}] missing {len(keys)} key(s) present in '{reference}':")
        for key in keys:
            print(f"    {key}")
    else:
        print(f"[{lang}] complete")
