"""Shared pytest fixtures for all tests."""

import pytest

from codeview.classifier import CodeModel, CodeProcessor
from codeview.classifier import processor as processor_module

# One idiomatic snippet per supported language
CANONICAL_SNIPPETS = {
    "kt": """fun main() {
    val name = "Kotlin"
    println("Hello, $name")
}
""",
    "java": """public class Greeter {
    public static void main(String[] args) {
        System.out.println("Hello, World");
    }
}
""",
    "js": "function foo() { return 1; }",
    "py": """def greet(name):
    if name is None:
        return "Hello"
    print("Hello, " + name)
""",
    "rb": """def greet(name)
  puts "Hello, #{name}"
end
""",
    "go": """package main

import "fmt"

func main() {
    msg := "Hello"
    fmt.Println(msg)
}
""",
    "c": """#include <stdio.h>

int main(void) {
    printf("Hello\\n");
    return 0;
}
""",
    "cpp": """#include <iostream>

int main() {
    std::cout << "Hello" << std::endl;
    return 0;
}
""",
    "cs": """using System;

namespace Demo
{
    class Program
    {
        static void Main(string[] args)
        {
            Console.WriteLine("Hello");
        }
    }
}
""",
    "php": """<?php
$name = "World";
echo "Hello, " . $name;
?>
""",
    "swift": """import UIKit

func greet(name: String) -> String {
    guard !name.isEmpty else { return "" }
    return "Hello, \\(name)"
}
""",
    "rs": """fn main() {
    let mut count: i32 = 0;
    count += 1;
    println!("{}", count);
}
""",
    "sh": """#!/bin/bash
for f in *.txt; do
  echo "$f"
done
""",
    "sql": "SELECT id, name FROM users WHERE active = 1 ORDER BY name;",
    "css": """body {
  margin: 0;
  padding: 10px;
  color: #333;
}
""",
    "html": """<!DOCTYPE html>
<html>
  <body>
    <div class="greeting">Hello</div>
  </body>
</html>
""",
}


@pytest.fixture
def canonical_snippets():
    """Idiomatic snippet for every supported language."""
    return dict(CANONICAL_SNIPPETS)


@pytest.fixture
def model():
    """A model compiled from the built-in feature table."""
    return CodeModel()


@pytest.fixture
def trained_processor():
    """A processor with its model already built."""
    processor = CodeProcessor()
    processor.train()
    return processor


@pytest.fixture
def fresh_global_processor(monkeypatch):
    """Reset the process-wide processor for the duration of a test."""
    monkeypatch.setattr(processor_module, "_processor", None)
    yield
    processor_module._processor = None
