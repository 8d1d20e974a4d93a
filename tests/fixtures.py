"""
Test fixtures for cppscan.

This module provides sample C/C++ code and helper paths
for testing the scanner.
"""

from pathlib import Path

from engine.config import GENERATED_FIXTURE_MARKER, GENERATED_TEST_MARKER

SAMPLE_PROJECT = Path(__file__).parent / "fixtures" / "sample_project"

# Headers with plain prototypes
SIMPLE_PROTOTYPES = '''
int sum(int a, int b);
void reset();
double scale(double factor, int times, bool clamp);
'''

PROTOTYPE_WITH_COMMENTS = '''
// int ignored(int a);
int visible(int a); // trailing remark (with parens)
'''

MULTI_LINE_DECLARATION = '''
void foo(int a,
          int b);
'''

MULTI_LINE_WITH_COMMENTS = '''
bool configure(int width,   // pixels
               int height,  // pixels
               bool fullscreen);
'''

# Declaration with a one-line body, followed by another prototype
INLINE_BODY = '''
int sum(int a,int b){ return a+b; }
void after();
'''

# Definition whose body spans several lines and contains call statements
MULTI_LINE_BODY = '''
int compute(int x) {
    int y = helper(x);
    if (y > 0) {
        return twice(y);
    }
    return 0;
}
int next(int z);
'''

# Body opened on the line after the declaration
BRACE_ON_NEXT_LINE = '''
void run(int steps)
{
    step(steps);
}
void stop();
'''

CONSTRUCTOR_BODY = '''
Foo::Foo(int x)
{
    return helper(x);
}
Foo::~Foo()
{
    delete release(handle);
}
typedef void (*Callback)(int);
int bar();
'''

UNTERMINATED_BODY = '''
int broken(int a) {
    if (a) {
        return 1;
    }
'''

UNTERMINATED_PARAMS = '''
int broken(int a,
           int b
'''

CLASS_HEADER = '''
#ifndef SHAPE_H
#define SHAPE_H

#include <vector>

class Shape {
public:
    double area(int precision);
    static int count();
    std::vector<int> corners(int limit);
private:
    int sides;
};

#endif
'''

# Translation units
SIMPLE_INCLUDES = '''
#include "Bar.h"
#include <vector>
#include <vector.h>
#include <sys/types.h>
#include "util/Helpers.hpp"
'''

INCLUDES_WITH_COMMENTS = '''
#include "Active.h" // kept
// #include "Disabled.h"
   #include   <iostream>
int main() { return 0; }
'''

NO_INCLUDES = '''
int main() {
    return 0;
}
'''

MALFORMED_INCLUDE = '''
#include <vector>
#include %vector>
'''

GENERATED_TEST_FILE = GENERATED_TEST_MARKER + '''
#include "Calculator.h"
#include <cassert>
'''

GENERATED_FIXTURE_FILE = GENERATED_FIXTURE_MARKER + '''
void setUp();
void tearDown();
'''
