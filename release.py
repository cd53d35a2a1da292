import os
import re

TARGET_FILE = os.path.join("kerosene_converter", "config.py")
VERSION_PATTERN = re.compile(r'CURRENT_VERSION\s*=\s*".*?"')


def bump_version(target_file: str, new_version: str) -> bool:
    """
    Reescreve CURRENT_VERSION no arquivo de config.
    Returns False when the assignment was not found (file left as is).
    """
    with open(target_file, "r", encoding="utf-8") as f:
        content = f.read()

    new_content = VERSION_PATTERN.sub(f'CURRENT_VERSION = "{new_version}"', content)
    if content == new_content:
        return False

    with open(target_file, "w", encoding="utf-8") as f:
        f.write(new_content)
    return True


def release_new_version():
    print("--- KEROSENE CONVERTER RELEASE ---")

    new_version = input("Digite o número da nova versão (ex: 1.1.0): ").strip()

    if not new_version:
        print("Versão inválida.")
        return

    tag_name = f"v{new_version}"

    print(f"\n1. Atualizando {TARGET_FILE} para {new_version}...")

    try:
        if not bump_version(TARGET_FILE, new_version):
            print(f"⚠️ AVISO: A versão não foi alterada. Verifique o formato em {TARGET_FILE}.")
    except FileNotFoundError:
        print(f"ERRO CRÍTICO: O arquivo {TARGET_FILE} não foi encontrado!")
        return

    print("\n2. Executando comandos Git...")

    commands = [
        "git add .",
        f'git commit -m "Release {tag_name}"',
        "git push origin main",
        f"git tag {tag_name}",
        f"git push origin {tag_name}"
    ]

    for cmd in commands:
        print(f"> {cmd}")
        result = os.system(cmd)

        if result != 0:
            if "commit" in cmd:
                print("⚠️ Aviso: Nada para commitar. Continuando...")
            else:
                print(f"❌ ERRO ao executar: {cmd}")
                print("Interrompendo script para evitar inconsistências.")
                return

    print(f"\n✅ SUCESSO! A versão {tag_name} foi enviada.")


if __name__ == "__main__":
    release_new_version()
