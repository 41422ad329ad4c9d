# cppstarter/templates.py
"""
Text of every generated configuration file except the license.

Each ``render_*`` function is pure: it takes a :class:`ProjectSpec` (or
nothing) and returns the file body. Bodies are assembled from short line
lists joined with ``\\n`` and always end with a newline.
"""

from __future__ import annotations

from typing import List

from cppstarter.definitions import (
    FMT_COMMIT,
    FMT_REPOSITORY,
    GOOGLETEST_COMMIT,
    GOOGLETEST_REPOSITORY,
)
from cppstarter.project_spec import ProjectSpec

__all__ = [
    "render_root_cmake",
    "render_module_cmake",
    "render_tests_cmake",
    "render_dependencies_cmake",
    "render_compiler_warnings_cmake",
    "render_static_analysis_cmake",
    "render_ci_workflow",
    "render_clang_format",
    "render_clang_tidy",
    "render_gitignore",
    "render_readme",
]


def _join(lines: List[str]) -> str:
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# CMake build descriptors
# ---------------------------------------------------------------------------


def render_root_cmake(spec: ProjectSpec) -> str:
    """Top-level CMakeLists.txt."""
    up = spec.name_upper
    return _join([
        f"cmake_minimum_required(VERSION {spec.min_cmake_version})",
        "",
        f"project({spec.name}",
        "  VERSION 0.1.0",
        f'  HOMEPAGE_URL "{spec.repo_url}"',
        "  LANGUAGES CXX)",
        "",
        "# Refuse in-source builds",
        "if(PROJECT_SOURCE_DIR STREQUAL PROJECT_BINARY_DIR)",
        "  message(FATAL_ERROR",
        '    "In-source builds are not allowed. "',
        '    "Use a separate build directory, e.g. cmake -S . -B build")',
        "endif()",
        "",
        f"set(CMAKE_CXX_STANDARD {spec.cpp_standard})",
        "set(CMAKE_CXX_STANDARD_REQUIRED ON)",
        "set(CMAKE_CXX_EXTENSIONS OFF)",
        "set(CMAKE_EXPORT_COMPILE_COMMANDS ON)",
        "",
        f'option({up}_ENABLE_WARNINGS "Enable compiler warnings" ON)',
        f'option({up}_BUILD_TESTS "Build the unit tests" ON)',
        f'option({up}_ENABLE_STATIC_ANALYSIS "Run clang-tidy and cppcheck during the build" ON)',
        "",
        "if(NOT CMAKE_BUILD_TYPE AND NOT CMAKE_CONFIGURATION_TYPES)",
        '  message(STATUS "No build type selected, defaulting to Release")',
        '  set(CMAKE_BUILD_TYPE Release CACHE STRING "Build type" FORCE)',
        '  set_property(CACHE CMAKE_BUILD_TYPE PROPERTY STRINGS "Debug" "Release")',
        "endif()",
        "",
        'set(CMAKE_CXX_FLAGS_DEBUG "-O0 -g")',
        'set(CMAKE_CXX_FLAGS_RELEASE "-O3")',
        "",
        'list(APPEND CMAKE_MODULE_PATH "${CMAKE_CURRENT_SOURCE_DIR}/cmake")',
        "include(Dependencies)",
        "include(CompilerWarnings)",
        "include(StaticAnalysis)",
        "",
        f"add_subdirectory({spec.name})",
        "",
        f"if({up}_BUILD_TESTS)",
        "  enable_testing()",
        "  add_subdirectory(tests)",
        "endif()",
    ])


def render_module_cmake(spec: ProjectSpec) -> str:
    """``<name>/CMakeLists.txt``: the static library target."""
    name = spec.name
    up = spec.name_upper
    return _join([
        f"file(GLOB_RECURSE {up}_SOURCES CONFIGURE_DEPENDS",
        '  "${CMAKE_CURRENT_SOURCE_DIR}/src/*.cpp")',
        "",
        f"add_library({name} STATIC ${{{up}_SOURCES}})",
        f"add_library({name}::{name} ALIAS {name})",
        "",
        f"target_include_directories({name}",
        "  PUBLIC",
        "    $<BUILD_INTERFACE:${CMAKE_CURRENT_SOURCE_DIR}/include>",
        "    $<INSTALL_INTERFACE:include>)",
        "",
        f"target_link_libraries({name} PUBLIC fmt::fmt)",
        "",
        f"if({up}_ENABLE_WARNINGS)",
        f"  set_project_warnings({name})",
        "endif()",
        f"enable_static_analysis({name})",
        "",
        "include(GNUInstallDirs)",
        f"install(TARGETS {name}",
        "  ARCHIVE DESTINATION ${CMAKE_INSTALL_LIBDIR}",
        "  LIBRARY DESTINATION ${CMAKE_INSTALL_LIBDIR})",
        "install(DIRECTORY include/ DESTINATION ${CMAKE_INSTALL_INCLUDEDIR})",
    ])


def render_tests_cmake(spec: ProjectSpec) -> str:
    """``tests/CMakeLists.txt``: GoogleTest + test discovery."""
    name = spec.name
    return _join([
        "include(FetchContent)",
        "",
        "FetchContent_Declare(",
        "  googletest",
        f"  GIT_REPOSITORY {GOOGLETEST_REPOSITORY}",
        f"  GIT_TAG {GOOGLETEST_COMMIT})",
        "set(gtest_force_shared_crt ON CACHE BOOL \"\" FORCE)",
        "set(INSTALL_GTEST OFF CACHE BOOL \"\" FORCE)",
        "FetchContent_MakeAvailable(googletest)",
        "",
        "file(GLOB_RECURSE TEST_SOURCES CONFIGURE_DEPENDS",
        '  "${CMAKE_CURRENT_SOURCE_DIR}/*.cpp")',
        "",
        f"add_executable({name}_tests ${{TEST_SOURCES}})",
        f"target_link_libraries({name}_tests PRIVATE {name} GTest::gtest_main)",
        "",
        "include(GoogleTest)",
        f"gtest_discover_tests({name}_tests)",
    ])


def render_dependencies_cmake() -> str:
    """``cmake/Dependencies.cmake``: fmt pinned to a fixed commit."""
    return _join([
        "include(FetchContent)",
        "",
        "FetchContent_Declare(",
        "  fmt",
        f"  GIT_REPOSITORY {FMT_REPOSITORY}",
        f"  GIT_TAG {FMT_COMMIT})",
        "FetchContent_MakeAvailable(fmt)",
    ])


def render_compiler_warnings_cmake() -> str:
    """``cmake/CompilerWarnings.cmake``: ``set_project_warnings(target)``."""
    return _join([
        "function(set_project_warnings target)",
        "  set(GCC_CLANG_WARNINGS",
        "    -Wall",
        "    -Wextra",
        "    -Wpedantic",
        "    -Wshadow",
        "    -Wnon-virtual-dtor",
        "    -Wold-style-cast",
        "    -Wcast-align",
        "    -Wunused",
        "    -Woverloaded-virtual",
        "    -Wconversion",
        "    -Wsign-conversion",
        "    -Wnull-dereference",
        "    -Wdouble-promotion",
        "    -Wformat=2)",
        "",
        "  set(MSVC_WARNINGS",
        "    /W4",
        "    /permissive-",
        "    /w14242",
        "    /w14254",
        "    /w14263",
        "    /w14265",
        "    /w14287",
        "    /w14296",
        "    /w14311",
        "    /w14545",
        "    /w14546",
        "    /w14547",
        "    /w14549",
        "    /w14555",
        "    /w14619",
        "    /w14640",
        "    /w14826",
        "    /w14905",
        "    /w14906",
        "    /w14928)",
        "",
        '  if(CMAKE_CXX_COMPILER_ID MATCHES "GNU|Clang")',
        "    target_compile_options(${target} PRIVATE ${GCC_CLANG_WARNINGS})",
        "  elseif(MSVC)",
        "    target_compile_options(${target} PRIVATE ${MSVC_WARNINGS})",
        "  else()",
        '    message(WARNING "No compiler warnings set for compiler \'${CMAKE_CXX_COMPILER_ID}\'")',
        "  endif()",
        "endfunction()",
    ])


def render_static_analysis_cmake(spec: ProjectSpec) -> str:
    """``cmake/StaticAnalysis.cmake``: ``enable_static_analysis(target)``.

    clang-tidy and cppcheck are attached to the given target only, so
    fetched third-party sources are never analysed. Each tool is optional.
    """
    up = spec.name_upper
    return _join([
        "function(enable_static_analysis target)",
        f"  if(NOT {up}_ENABLE_STATIC_ANALYSIS)",
        "    return()",
        "  endif()",
        "",
        "  find_program(CLANG_TIDY_EXE NAMES clang-tidy)",
        "  if(CLANG_TIDY_EXE)",
        '    set_target_properties(${target} PROPERTIES CXX_CLANG_TIDY "${CLANG_TIDY_EXE}")',
        "  else()",
        '    message(WARNING "clang-tidy not found, skipping clang-tidy checks")',
        "  endif()",
        "",
        "  find_program(CPPCHECK_EXE NAMES cppcheck)",
        "  if(CPPCHECK_EXE)",
        "    set_target_properties(${target} PROPERTIES CXX_CPPCHECK",
        '      "${CPPCHECK_EXE};--enable=warning,performance,portability,style;'
        '--inline-suppr;--suppress=missingIncludeSystem;--quiet")',
        "  else()",
        '    message(WARNING "cppcheck not found, skipping cppcheck checks")',
        "  endif()",
        "endfunction()",
    ])


# ---------------------------------------------------------------------------
# CI and tooling configs
# ---------------------------------------------------------------------------


def render_ci_workflow() -> str:
    """``.github/workflows/ci.yml``: checkout, configure, build, test."""
    return _join([
        "name: CI",
        "",
        "on:",
        "  push:",
        "  pull_request:",
        "",
        "jobs:",
        "  build:",
        "    runs-on: ubuntu-latest",
        "    steps:",
        "      - name: Checkout",
        "        uses: actions/checkout@v4",
        "",
        "      - name: Configure",
        "        run: cmake -S . -B build -DCMAKE_BUILD_TYPE=Release",
        "",
        "      - name: Build",
        "        run: cmake --build build",
        "",
        "      - name: Test",
        "        run: ctest --test-dir build --output-on-failure",
    ])


def render_clang_format() -> str:
    return _join([
        "---",
        "BasedOnStyle: Google",
        "IndentWidth: 4",
        "ColumnLimit: 100",
        "AccessModifierOffset: -4",
        "AllowShortFunctionsOnASingleLine: Inline",
        "BreakBeforeBraces: Attach",
        "DerivePointerAlignment: false",
        "PointerAlignment: Left",
        "SortIncludes: true",
        "...",
    ])


def render_clang_tidy() -> str:
    return _join([
        "---",
        "Checks: >",
        "  -*,",
        "  bugprone-*,",
        "  clang-analyzer-*,",
        "  cppcoreguidelines-*,",
        "  modernize-*,",
        "  performance-*,",
        "  readability-*,",
        "  -modernize-use-trailing-return-type,",
        "  -readability-identifier-length",
        "WarningsAsErrors: ''",
        "HeaderFilterRegex: '.*'",
        "FormatStyle: file",
        "...",
    ])


def render_gitignore() -> str:
    return _join([
        "# Build output",
        "build/",
        "cmake-build-*/",
        "out/",
        "",
        "# CMake",
        "CMakeCache.txt",
        "CMakeFiles/",
        "CMakeUserPresets.json",
        "compile_commands.json",
        "",
        "# Editors",
        ".vscode/",
        ".idea/",
        "*.swp",
        "",
        "# OS",
        ".DS_Store",
    ])


def render_readme(spec: ProjectSpec) -> str:
    """README.md; only the upper-case project name is substituted."""
    return _join([
        f"# {spec.name_upper}",
        "",
        "## Build",
        "",
        "```sh",
        "cppstarter config release",
        "cppstarter build",
        "cppstarter test",
        "```",
        "",
        "or with plain CMake:",
        "",
        "```sh",
        "cmake -S . -B build -G Ninja -DCMAKE_BUILD_TYPE=Release",
        "cmake --build build",
        "ctest --test-dir build --output-on-failure",
        "```",
    ])
